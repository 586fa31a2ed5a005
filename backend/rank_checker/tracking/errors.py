"""Errors raised by the rank check pipeline. Every one of them ends the run."""


class RankCheckError(Exception):
    default_message = "Rank check failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class TransportError(RankCheckError):
    """The HTTP call to the SERP API did not complete."""

    default_message = "Request to the SERP API failed"

    def __init__(self, message: str | None = None, *, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable


class DecodeError(RankCheckError):
    default_message = "Error with JSON decoding or Empty data"


class NoResultsError(RankCheckError):
    default_message = "organicResults is empty"
