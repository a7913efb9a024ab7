from __future__ import annotations

import logging

from ..domain.models import UpdateSummary
from ..ports.feed_port import FeedPort
from ..ports.progress_port import ProgressPort
from ..services.advisory_writer import AdvisoryWriter
from ..services.record_splitter import RecordSplitter
from .list_versions import is_skipped_branch

logger = logging.getLogger(__name__)


class UpdatePhotonUseCase:
    """Mirror every Photon branch of the feed into the vuln-list tree.

    One sequential pass over the manifest. Any fetch, decode, identifier or
    write failure aborts the run; files written for earlier branches stay on
    disk.
    """

    def __init__(
        self,
        feed: FeedPort,
        writer: AdvisoryWriter,
        splitter: RecordSplitter | None = None,
        progress: ProgressPort | None = None,
    ) -> None:
        self._feed = feed
        self._writer = writer
        self._splitter = splitter or RecordSplitter()
        self._progress = progress

    def execute(self) -> UpdateSummary:
        logger.info("Fetching Photon")
        summary = UpdateSummary()

        for version in self._feed.list_versions():
            if is_skipped_branch(version):
                continue
            payload = self._feed.fetch_advisory(version)
            records = self._splitter.split(version, payload)

            if self._progress:
                self._progress.start(len(records), desc=f"photon {version}")
            try:
                for record in records:
                    path = self._writer.write_record(record.sub_path, record.cve_id, record)
                    summary.files.append(path)
                    summary.records_written += 1
                    if self._progress:
                        self._progress.advance()
            finally:
                if self._progress:
                    self._progress.finish()

            summary.versions.append(version)
            logger.info(f"Photon {version}: wrote {len(records)} advisories")

        logger.info(f"Photon: wrote {summary.records_written} advisories for {len(summary.versions)} versions")
        return summary
