from dataclasses import dataclass


def _to_seconds(hms: str) -> int:
    hours, minutes, seconds = (hms.split(':') + ['0'])[:3]
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds)


@dataclass(frozen=True)
class Period:
    id: str
    start: str  # "HH:MM:SS"
    end: str

    @property
    def start_seconds(self) -> int:
        return _to_seconds(self.start)

    @property
    def end_seconds(self) -> int:
        return _to_seconds(self.end)

    def contains(self, seconds: int) -> bool:
        # Half-open: the end instant belongs to whatever comes next
        return self.start_seconds <= seconds < self.end_seconds

    def to_dict(self):
        return {
            'id': self.id,
            'start': self.start,
            'end': self.end
        }


@dataclass(frozen=True)
class PeriodInfo:
    id: str
    is_current: bool