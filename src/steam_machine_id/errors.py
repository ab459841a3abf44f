"""Exceptions raised by steam_machine_id."""


class MachineIDError(Exception):
    """Base class for machine ID errors."""


class RandomSourceUnavailable(MachineIDError):
    """The random byte source failed or returned too few bytes."""
