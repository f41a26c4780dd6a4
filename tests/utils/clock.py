from datetime import datetime, timedelta

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0)


class FakeClock:
    """Manually advanced clock; pass the instance wherever a clock callable is accepted"""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)
