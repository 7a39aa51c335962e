from .simulator import Simulator, SimulatorPhase
from .parallel import ShardResult, estimate_sharded

__all__ = ["Simulator", "SimulatorPhase", "ShardResult", "estimate_sharded"]
