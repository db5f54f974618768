# app/models/activity_type.py

from enum import Enum


class ActivityType(str, Enum):
    BREASTFEEDING = "breastfeeding"
    FORMULA = "formula"
    EBM = "ebm"
    PUMPING = "pumping"
    SLEEP = "sleep"
    WAKE_UP = "wakeUp"
    PEE = "pee"
    POOP = "poop"
    PEE_POOP = "peePoop"

    @classmethod
    def parse(cls, raw):
        """Unknown or missing values read back as breastfeeding."""
        try:
            return cls(raw)
        except ValueError:
            return cls.BREASTFEEDING

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def uses_durations(self) -> bool:
        return self is ActivityType.BREASTFEEDING

    @property
    def uses_volume(self) -> bool:
        return self in VOLUME_TYPES

    @property
    def is_feeding(self) -> bool:
        return self in FEEDING_TYPES

    @property
    def is_sleep(self) -> bool:
        return self is ActivityType.SLEEP

    @property
    def is_diaper(self) -> bool:
        return self in DIAPER_TYPES

    @property
    def default_summary(self) -> str:
        return DEFAULT_SUMMARIES.get(self, self.display_name)


DISPLAY_NAMES = {
    ActivityType.BREASTFEEDING: "Breastfeeding",
    ActivityType.FORMULA: "Formula",
    ActivityType.EBM: "EBM",
    ActivityType.PUMPING: "Pumping",
    ActivityType.SLEEP: "Sleep",
    ActivityType.WAKE_UP: "Wake Up",
    ActivityType.PEE: "Pee",
    ActivityType.POOP: "Poop",
    ActivityType.PEE_POOP: "Pee & Poop",
}

DEFAULT_SUMMARIES = {
    ActivityType.SLEEP: "Fell asleep",
    ActivityType.WAKE_UP: "Woke up",
    ActivityType.PEE: "Pee",
    ActivityType.POOP: "Poop",
    ActivityType.PEE_POOP: "Pee & Poop",
}

VOLUME_TYPES = frozenset({ActivityType.FORMULA, ActivityType.EBM, ActivityType.PUMPING})
# Pumping is not a feeding of the baby
FEEDING_TYPES = frozenset({ActivityType.BREASTFEEDING, ActivityType.FORMULA, ActivityType.EBM})
DIAPER_TYPES = frozenset({ActivityType.PEE, ActivityType.POOP, ActivityType.PEE_POOP})
