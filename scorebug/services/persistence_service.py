"""
Persistence service for the indoor hockey scoreboard overlay.

This module handles saving and loading match state to/from JSON files.
Only the durable state is written: teams, scores, cards and the clock.
Goal reveal timers are transient and start from IDLE after a load.
"""
import datetime
import json
import logging
import os
from typing import Optional

from ..models import MatchState
from ..utils import now_ts

logger = logging.getLogger(__name__)


class PersistenceService:
    """Service for persisting match state to JSON files."""

    @staticmethod
    def serialize_match_state(match_state: MatchState) -> dict:
        """
        Build the JSON payload for a match, stamped with the save time.

        Args:
            match_state: Snapshot to serialize

        Returns:
            Dictionary suitable for JSON serialization
        """
        data = match_state.to_json()
        data["saved_at"] = now_ts()
        return data

    @staticmethod
    def deserialize_match_state(data: dict) -> MatchState:
        """
        Rebuild a MatchState from a JSON payload.

        Raises:
            ValueError: If the payload is not a dictionary or holds bad values
        """
        if not isinstance(data, dict):
            raise ValueError("Match data must be a JSON object")
        try:
            return MatchState.from_json(data)
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid match data: {e}") from e

    @staticmethod
    def save_match_to_file(match_state: MatchState, file_path: str) -> None:
        """
        Save match state to a JSON file.

        Args:
            match_state: The match state to save
            file_path: Path where to save the file

        Raises:
            OSError: If the file cannot be written
        """
        snapshot = PersistenceService.serialize_match_state(match_state)

        # Ensure directory exists
        directory = os.path.dirname(file_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2)

    @staticmethod
    def load_match_from_file(file_path: str) -> MatchState:
        """
        Load match state from a JSON file.

        Args:
            file_path: Path to the JSON file to load

        Returns:
            MatchState instance loaded from file

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file contains invalid JSON
            ValueError: If JSON structure is invalid
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Match file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return PersistenceService.deserialize_match_state(data)

    @staticmethod
    def auto_save(match_state: MatchState, auto_save_dir: str = "autosave") -> Optional[str]:
        """
        Automatically save match state with timestamp.

        Args:
            match_state: Match state to save
            auto_save_dir: Directory for auto-save files

        Returns:
            Path to saved file, or None if save failed
        """
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = os.path.join(auto_save_dir, f"match_autosave_{timestamp}.json")
        try:
            PersistenceService.save_match_to_file(match_state, file_path)
        except OSError:
            # Auto-save should not take the overlay down mid-broadcast
            logger.warning("Auto-save to %s failed", file_path, exc_info=True)
            return None
        return file_path
