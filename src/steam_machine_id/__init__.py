"""Steam machine ID generation.

Machine IDs are most commonly supplied to Steam when logging in::

    from steam_machine_id import MachineID

    machine_id = MachineID.from_account_name("accountname")
    payload = machine_id.to_message()
"""

from .errors import MachineIDError, RandomSourceUnavailable
from .machine_id import MachineID

__version__ = "0.1.0"

__all__ = ["MachineID", "MachineIDError", "RandomSourceUnavailable"]
