# bikeflow/errors.py


class BikeflowError(Exception):
    """Base class for everything bikeflow raises on purpose."""


class DataLoadError(BikeflowError):
    """
    A station or trip source could not be fetched or parsed.
    Loading stops here, nothing gets rendered.
    """


class MalformedTripError(BikeflowError):
    """A single trip row has an unusable timestamp or station id."""

    def __init__(self, message: str, row=None):
        super().__init__(message)
        self.row = row
