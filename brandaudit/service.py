"""Submission intake: validate, audit, then deliver the report."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from brandaudit.audit.models import AuditReport
from brandaudit.audit.runner import AuditRunner, CompletionHook
from brandaudit.config.schema import Config
from brandaudit.notify.benchmark import BenchmarkSubscriber
from brandaudit.notify.resend import ResendNotifier
from brandaudit.report.render import render_html
from brandaudit.search.client import SearchClient
from brandaudit.submission import Submission, SubmissionError
from brandaudit.utils.redaction import SecretRedactor


@dataclass(slots=True)
class AuditOutcome:
    """Result of one submission."""

    report: AuditReport
    notified: bool = False
    subscribed: bool = False


class AuditService:
    """Wire configuration, the search client and the delivery side-channels together."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        search_client: SearchClient | None = None,
        notifier: ResendNotifier | None = None,
        subscriber: BenchmarkSubscriber | None = None,
    ):
        self.config = config or Config()
        self.redactor = SecretRedactor(
            enabled=self.config.security.redact_secrets,
            extra_secrets=self.config.secrets(),
        )
        self.search_client = search_client or SearchClient(self.config.search, self.redactor)
        self.notifier = notifier or ResendNotifier(self.config.notify)
        self.subscriber = subscriber or BenchmarkSubscriber(self.config.subscribe)
        self.runner = AuditRunner(
            self.search_client.search,
            timeout=self.config.search.timeout,
            concurrent=self.config.search.concurrent,
        )

    async def submit(
        self,
        submission: Submission,
        *,
        notify: bool = True,
        subscribe: bool = True,
    ) -> AuditOutcome:
        """
        Audit a submitted business.

        Raises SubmissionError for blank fields and AuditError when any search
        fails. Delivery failures are logged and reflected on the outcome only.
        """
        errors = submission.validate()
        if errors:
            raise SubmissionError(errors)

        outcome_flags = {"notified": False, "subscribed": False}
        hooks: list[CompletionHook] = []

        if notify:
            async def send_report(report: AuditReport) -> None:
                outcome_flags["notified"] = await self.notifier.send(
                    submission, render_html(report)
                )

            hooks.append(send_report)

        if subscribe:
            async def auto_subscribe(report: AuditReport) -> None:
                outcome_flags["subscribed"] = await self.subscriber.subscribe(
                    submission.name, submission.email
                )

            hooks.append(auto_subscribe)

        report = await self.runner.run(
            submission.company,
            submission.address,
            submission.phone,
            submission.website,
            on_complete=hooks,
        )
        if not outcome_flags["notified"] and notify:
            logger.warning("Audit report for {} was not emailed", submission.company)
        return AuditOutcome(report=report, **outcome_flags)
