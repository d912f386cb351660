"""Request-level failures raised by the store, scoring and API layers."""


class GameError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class InvalidInput(GameError):
    """Malformed game code, team names or points."""
    status_code = 400


class NotFound(GameError):
    """Team id absent from the addressed game."""
    status_code = 404
