"""Demo traffic simulator."""

from .sim import SCENARIO, ISim, TrafficSim

__all__ = ["ISim", "SCENARIO", "TrafficSim"]
