from model.movie import Movie
from model.theatre import ShowRoom, ShowsDisplay
from model.seat import SeatType, SeatTypeEnum, ShowRoomSeat, seat_type_enum
from model.booking import Booking

# Creation order; foreign-key targets come first
TABLE_ORDER = ["Movie", "ShowRoom", "SeatType", "ShowRoomSeat", "ShowsDisplay", "Booking"]

__all__ = [
    "Movie",
    "ShowRoom",
    "ShowsDisplay",
    "SeatType",
    "SeatTypeEnum",
    "ShowRoomSeat",
    "Booking",
    "seat_type_enum",
    "TABLE_ORDER",
]
