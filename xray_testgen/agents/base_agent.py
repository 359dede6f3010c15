"""
Base Agent - Abstract base class for every pipeline stage
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
import logging


class BaseAgent(ABC):
    """
    Abstract base class for all agents.
    Each stage of test case generation is an agent with a named logger.
    """

    def __init__(self, name: str, description: str = ""):
        """
        Initialize the base agent.

        Args:
            name: Unique name for the agent
            description: Description of the agent's purpose
        """
        self.name = name
        self.description = description
        self.logger = logging.getLogger(f"agent.{name}")

    @abstractmethod
    async def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run the agent's stage against a shared context.

        Args:
            context: Inputs produced by earlier stages

        Returns:
            Dictionary with this stage's outputs
        """
        pass

    def log_info(self, message: str):
        """Log an info message"""
        self.logger.info(f"[{self.name}] {message}")

    def log_warning(self, message: str):
        """Log a warning message"""
        self.logger.warning(f"[{self.name}] {message}")

    def log_error(self, message: str):
        """Log an error message"""
        self.logger.error(f"[{self.name}] {message}")

    def log_debug(self, message: str):
        """Log a debug message"""
        self.logger.debug(f"[{self.name}] {message}")

    def __repr__(self):
        return f"<{self.__class__.__name__}(name='{self.name}')>"
