# Beginner summary: This file marks utils as a package so helpers like get_logger can be imported.
from core_agents.utils.logger import get_logger

__all__ = ["get_logger"]
