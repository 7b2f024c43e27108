"""Audit orchestration: search, classify and aggregate the three identity queries."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from loguru import logger

from brandaudit.audit.aggregate import aggregate
from brandaudit.audit.classifier import classify
from brandaudit.audit.models import AuditReport, AuditSection, ClassifiedResult, QuerySpec
from brandaudit.search.models import SearchResult

SearchFn = Callable[[str], Awaitable[list[SearchResult]]]
CompletionHook = Callable[[AuditReport], Awaitable[Any]]

DEFAULT_TIMEOUT_S = 20.0


class AuditError(Exception):
    """Raised when an audit cannot be completed."""

    def __init__(self, message: str = "could not complete audit"):
        super().__init__(message)


def build_queries(business_name: str, address: str, phone: str) -> list[QuerySpec]:
    """Fixed queries of one audit, in report order."""
    return [
        QuerySpec(label="Company Name Search", query=business_name),
        QuerySpec(label="Business Address Search", query=address),
        QuerySpec(label="Phone Number Search", query=phone),
    ]


def build_section(
    spec: QuerySpec,
    raw_results: Sequence[SearchResult],
    business_name: str,
    official_site: str,
) -> AuditSection:
    """Classify one query's results and attach their breakdown."""
    classified = tuple(
        ClassifiedResult.from_result(
            r,
            classify(r.title, r.snippet, r.link, business_name, official_site),
        )
        for r in raw_results
    )
    counts, percentages = aggregate(classified)
    return AuditSection(
        label=spec.label,
        query=spec.query,
        results=classified,
        counts=counts,
        percentages=percentages,
    )


class AuditRunner:
    """
    Run the company, address and phone searches for one business.

    Every query is classified against the business name and official site.
    A failed or timed-out search aborts the whole audit; completion hooks run
    only once the full report exists and cannot fail the audit.
    """

    def __init__(
        self,
        search: SearchFn,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        concurrent: bool = False,
    ):
        self.search = search
        self.timeout = timeout
        self.concurrent = concurrent

    async def run(
        self,
        business_name: str,
        address: str,
        phone: str,
        official_site: str,
        on_complete: Sequence[CompletionHook] = (),
    ) -> AuditReport:
        queries = build_queries(business_name, address, phone)
        logger.info("Audit started for {!r} ({} queries)", business_name, len(queries))

        if self.concurrent:
            batches = await self._fetch_all(queries)
        else:
            batches = [await self._fetch(q) for q in queries]

        sections = []
        for spec, raw_results in zip(queries, batches):
            section = build_section(spec, raw_results, business_name, official_site)
            logger.info(
                "{}: {} results {}", section.label, section.total, section.counts
            )
            sections.append(section)

        report = AuditReport(
            business_name=business_name,
            official_site=official_site,
            sections=tuple(sections),
        )
        logger.info("Audit finished for {!r}", business_name)

        for hook in on_complete:
            await self._run_hook(hook, report)
        return report

    async def _fetch_all(self, queries: Sequence[QuerySpec]) -> list[list[SearchResult]]:
        # The first failure cancels the searches still in flight.
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [tg.create_task(self._fetch(q)) for q in queries]
        except ExceptionGroup as group:
            raise group.exceptions[0]
        return [task.result() for task in tasks]

    async def _fetch(self, spec: QuerySpec) -> list[SearchResult]:
        try:
            results = await asyncio.wait_for(self.search(spec.query), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("{} timed out after {}s", spec.label, self.timeout)
            raise AuditError() from e
        except Exception as e:
            logger.error("{} failed: {}", spec.label, e)
            raise AuditError() from e
        return list(results or [])

    @staticmethod
    async def _run_hook(hook: CompletionHook, report: AuditReport) -> None:
        name = getattr(hook, "__name__", repr(hook))
        try:
            await hook(report)
        except Exception as e:
            logger.warning("Post-audit step {} failed: {}", name, e)
