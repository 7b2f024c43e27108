"""Side-channel delivery: report email and newsletter sign-up."""

from brandaudit.notify.benchmark import BenchmarkSubscriber, SubscribeError
from brandaudit.notify.resend import NotifyError, ResendNotifier

__all__ = ["BenchmarkSubscriber", "NotifyError", "ResendNotifier", "SubscribeError"]
