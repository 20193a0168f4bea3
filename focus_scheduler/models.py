import enum

# Enums

class Chronotype(str, enum.Enum):
    EARLY_MORNING = "early_morning"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"          # Wraps past midnight (21:00 - 02:00)

    @classmethod
    def from_value(cls, value) -> "Chronotype":
        """Resolve a chronotype, accepting the legacy three-value scale as well."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized in LEGACY_CHRONOTYPES:
            return LEGACY_CHRONOTYPES[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown chronotype: {value!r}") from None

    @property
    def label(self) -> str:
        return CHRONOTYPE_LABELS[self]


class TaskPriority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return PRIORITY_ORDER[self]


class TaskState(str, enum.Enum):
    PENDING = "pending"
    SCHEDULED = "scheduled"
    UNSCHEDULED = "unscheduled"


# Optimal [start, end) hour window per chronotype
CHRONOTYPE_HOURS = {
    Chronotype.EARLY_MORNING: (5, 9),
    Chronotype.MORNING: (9, 12),
    Chronotype.AFTERNOON: (12, 17),
    Chronotype.EVENING: (17, 21),
    Chronotype.NIGHT: (21, 2),
}

CHRONOTYPE_LABELS = {
    Chronotype.EARLY_MORNING: "Early Morning (05-09)",
    Chronotype.MORNING: "Morning (09-12)",
    Chronotype.AFTERNOON: "Afternoon (12-17)",
    Chronotype.EVENING: "Evening (17-21)",
    Chronotype.NIGHT: "Night (21-02)",
}

LEGACY_CHRONOTYPES = {
    "neutral": Chronotype.AFTERNOON,
}

PRIORITY_ORDER = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}
