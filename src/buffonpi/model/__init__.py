from .field import Field
from .state import DropOutcome, SimulationState, Snapshot

__all__ = ["Field", "DropOutcome", "SimulationState", "Snapshot"]
