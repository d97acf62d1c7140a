from __future__ import annotations


class CloudJobsError(Exception):
    """
    Base class for errors raised by cloudjobs itself.

    Queue client failures and exceptions raised by a worker's own code are not
    wrapped in this hierarchy; they reach the caller unchanged.
    """


class ConfigurationError(CloudJobsError):
    """
    Missing/invalid configuration required to perform an operation.
    """


class DecodeError(CloudJobsError):
    """
    A payload could not be parsed into a job envelope.
    """


class UnresolvableWorkerError(CloudJobsError):
    """
    A worker name is unknown or does not denote an executable worker.

    Both causes share this single error type and message.
    """


class InvalidPayloadError(CloudJobsError):
    pass


class InvalidWorkerError(CloudJobsError):
    pass
