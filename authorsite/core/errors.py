"""
Error types shared by the route handlers and the store layer.
"""


class ValidationError(Exception):
    """Caller input failed a required-field, format or body-parse check.

    Always answered with a 400 and the exact ``message``.
    """

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class StoreFailure(Exception):
    """Any persistence error other than a recovered email conflict.

    Not recovered: the router turns it into a 500 with the message in ``details``.
    """
