from datetime import datetime
import pytz
from app.models.period import Period, PeriodInfo

LUNCH_BREAK = '昼休み'

PERIOD_TIMES = [
    Period('1', '09:00:00', '10:30:00'),
    Period('2', '10:45:00', '12:15:00'),
    Period(LUNCH_BREAK, '12:15:00', '13:05:00'),
    Period('3', '13:05:00', '14:35:00'),
    Period('4', '14:50:00', '16:20:00'),
    Period('5', '16:35:00', '18:05:00'),
    Period('6', '18:20:00', '19:50:00'),
]

# Sunday first, matching the labels stored in votes.json
WEEKDAYS = ['日', '月', '火', '水', '木', '金', '土']


class PeriodService:

    @staticmethod
    def seconds_since_midnight(moment: datetime) -> int:
        return moment.hour * 3600 + moment.minute * 60 + moment.second

    @staticmethod
    def find_period(period_id):
        for period in PERIOD_TIMES:
            if period.id == str(period_id):
                return period
        return None

    @staticmethod
    def resolve_period(moment: datetime) -> PeriodInfo:
        """
        Return the period containing `moment`, else the next one to start today.
        Once every period is over, the last period is returned as not current.
        """
        now = PeriodService.seconds_since_midnight(moment)

        next_period = None
        next_start = None
        for period in PERIOD_TIMES:
            if period.contains(now):
                return PeriodInfo(period.id, True)

            if now < period.start_seconds and (next_start is None or period.start_seconds < next_start):
                next_start = period.start_seconds
                next_period = period

        if next_period:
            return PeriodInfo(next_period.id, False)

        return PeriodInfo(PERIOD_TIMES[-1].id, False)

    @staticmethod
    def to_local(moment: datetime, tz_name: str) -> datetime:
        tz = pytz.timezone(tz_name)
        if moment.tzinfo is None:
            # Naive times are taken as UTC, like stored ISO timestamps
            moment = pytz.utc.localize(moment)
        return moment.astimezone(tz)

    @staticmethod
    def parse_timestamp(timestamp: str) -> datetime:
        # fromisoformat() before 3.11 does not accept the trailing 'Z'
        if timestamp.endswith('Z'):
            timestamp = timestamp[:-1] + '+00:00'
        return datetime.fromisoformat(timestamp)

    @staticmethod
    def resolve_timestamp(timestamp: str, tz_name: str) -> PeriodInfo:
        """Resolve the period of a stored comment timestamp in school-local time."""
        moment = PeriodService.parse_timestamp(timestamp)
        return PeriodService.resolve_period(PeriodService.to_local(moment, tz_name))

    @staticmethod
    def is_timestamp_in_period(timestamp: str, period_id, tz_name: str) -> bool:
        if not period_id:
            return True

        period = PeriodService.find_period(period_id)
        if not period:
            # Unknown period ids do not filter anything out
            return True

        local = PeriodService.to_local(PeriodService.parse_timestamp(timestamp), tz_name)
        return period.contains(PeriodService.seconds_since_midnight(local))

    @staticmethod
    def period_label(period_id) -> str:
        period_id = str(period_id)
        if period_id == LUNCH_BREAK:
            return LUNCH_BREAK
        return f"{period_id}限"

    @staticmethod
    def weekday_label(moment: datetime) -> str:
        # datetime.weekday() is Monday=0
        return WEEKDAYS[(moment.weekday() + 1) % 7]

    @staticmethod
    def current_slot(moment: datetime) -> dict:
        """Today's weekday and the current (or next) period, with header text."""
        day = PeriodService.weekday_label(moment)
        info = PeriodService.resolve_period(moment)
        return {
            'day': day,
            'periodId': info.id,
            'isCurrent': info.is_current,
            'headerText': f"{day}曜 {PeriodService.period_label(info.id)}"
        }

    @staticmethod
    def header_text(moment: datetime, day=None, period_id=None) -> str:
        """Header shown for a filter selection; blanks fall back to the current slot."""
        current = PeriodService.current_slot(moment)
        if not day and not period_id:
            return current['headerText']

        day = day or current['day']
        period_id = period_id or current['periodId']
        return f"{day}曜 {PeriodService.period_label(period_id)}"

    @staticmethod
    def list_periods() -> list:
        return [dict(p.to_dict(), label=PeriodService.period_label(p.id)) for p in PERIOD_TIMES]
