import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml

from countdown.puzzle import Puzzle, PuzzleRules

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / 'settings.yaml'


def _parse_numbers(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(',') if part.strip()]
    except ValueError:
        raise ValueError(f"COUNTDOWN_NUMBERS must be comma separated integers, got {raw!r}")


class Config:
    def __init__(self, settings_path: Optional[str] = None):
        self.settings_path = Path(settings_path or os.getenv('COUNTDOWN_SETTINGS') or DEFAULT_SETTINGS_PATH)
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

        settings = self._load_settings()
        self._puzzle_data = self._section(settings, 'puzzle')
        self.rules = self._load_rules(self._section(settings, 'rules'))
        self.rules.validate()

    def _load_settings(self) -> dict:
        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                settings = yaml.safe_load(f)
        except FileNotFoundError:
            raise ValueError(f"Settings file not found: {self.settings_path}")
        except yaml.YAMLError as e:
            logger.error("YAML parsing error in %s: %s", self.settings_path, e)
            raise ValueError(f"Malformed YAML in {self.settings_path}: {e}") from e

        if not settings:
            logger.warning("Empty settings file %s, using defaults", self.settings_path)
            return {}
        if not isinstance(settings, dict):
            raise ValueError(f"Settings file {self.settings_path} must contain a mapping")
        return settings

    def _section(self, settings: dict, name: str) -> dict:
        data = settings.get(name) or {}
        if not isinstance(data, dict):
            raise ValueError(f"'{name}' in {self.settings_path} must be a mapping")
        return data

    def default_puzzle(self) -> Puzzle:
        """
        The puzzle to solve when none is given on the command line.
        Environment overrides win over the settings file.

        Raises:
            ValueError: If the configured puzzle is invalid
        """
        target = os.getenv('COUNTDOWN_TARGET')
        numbers = os.getenv('COUNTDOWN_NUMBERS')

        if target is not None:
            try:
                target = int(target)
            except ValueError:
                raise ValueError(f"COUNTDOWN_TARGET must be an integer, got {target!r}")
        else:
            target = self._puzzle_data.get('target', 784)

        if numbers is not None:
            numbers = _parse_numbers(numbers)
        else:
            try:
                numbers = list(self._puzzle_data.get('numbers', [100, 50, 9, 5, 2, 4]))
            except TypeError as e:
                raise ValueError(f"Invalid puzzle numbers in {self.settings_path}: {e}") from e

        puzzle = Puzzle(numbers=numbers, target=target)
        puzzle.validate()
        return puzzle

    def _load_rules(self, data: dict) -> PuzzleRules:
        defaults = PuzzleRules()
        try:
            return PuzzleRules(
                large_numbers=list(data.get('large_numbers', defaults.large_numbers)),
                small_numbers=list(data.get('small_numbers', defaults.small_numbers)),
                num_large=int(data.get('num_large', defaults.num_large)),
                num_small=int(data.get('num_small', defaults.num_small)),
                target_min=int(data.get('target_min', defaults.target_min)),
                target_max=int(data.get('target_max', defaults.target_max)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid rules in {self.settings_path}: {e}") from e
