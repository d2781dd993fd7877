"""
Agents module.

Provides agents that move through a maze graph:
- ChaserAgent: shortest non-backtracking path, re-planned each move
- RandomAgent: random forward edge baseline
"""

from pacpath.agents.base import Agent, AgentContext, non_reversing_edges
from pacpath.agents.chaser import ChaserAgent
from pacpath.agents.random_agent import RandomAgent

__all__ = [
    "Agent",
    "AgentContext",
    "ChaserAgent",
    "RandomAgent",
    "get_agent",
    "non_reversing_edges",
]


def get_agent(name: str, **kwargs) -> Agent:
    """
    Get an agent by name.

    Args:
        name: Agent identifier (chaser, random)
        **kwargs: Additional arguments passed to agent constructor (e.g., seed)

    Returns:
        Instantiated agent

    Raises:
        ValueError: If agent name is unknown
    """
    agents = {
        "chaser": ChaserAgent,
        "random": RandomAgent,
    }

    if name not in agents:
        available = ", ".join(agents.keys())
        raise ValueError(f"Unknown agent '{name}'. Available: {available}")

    # Only the random agent accepts kwargs
    if name == "random":
        return RandomAgent(**kwargs)

    return agents[name]()
