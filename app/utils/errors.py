"""Error types raised by the data-access helpers."""


class RecordNotFoundError(LookupError):
    """Raised when a row looked up by primary key does not exist."""

    def __init__(self, model_name: str, id_field: str, id) -> None:
        self.model_name = model_name
        self.id_field = id_field
        self.id = id
        super().__init__(f"{model_name} with {id_field}={id} not found")
