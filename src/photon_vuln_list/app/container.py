from __future__ import annotations

import logging
from pathlib import Path

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..core.services.advisory_writer import AdvisoryWriter
from ..core.services.record_splitter import RecordSplitter
from ..core.usecases.list_versions import ListVersionsUseCase
from ..core.usecases.update_photon import UpdatePhotonUseCase
from ..infra.document_store import LocalDocumentStore
from ..infra.http_client import HttpClient
from ..infra.photon_feed import PhotonFeedAdapter
from ..infra.progress import NullProgress, TqdmProgress

logger = logging.getLogger(__name__)

PHOTON_DIR = "photon"


def http_client_resource(timeout_seconds, retry_wait_seconds):
	logger.debug(f"Initializing HTTP client (timeout={timeout_seconds}s)")
	client = HttpClient(timeout_seconds=timeout_seconds, retry_wait_seconds=retry_wait_seconds)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


def photon_dir(vuln_list_dir) -> Path:
	path = Path(vuln_list_dir) / PHOTON_DIR
	logger.info(f"Writing Photon advisories to: {path}")
	return path


def progress_sink(enabled):
	return TqdmProgress() if enabled else NullProgress()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
		retry_wait_seconds=config.retry_wait_seconds,
	)

	feed = providers.Factory(
		PhotonFeedAdapter,
		http_client=http_client,
		base_url=config.url,
		retry=config.retry,
	)

	store = providers.Singleton(LocalDocumentStore)
	writer = providers.Factory(
		AdvisoryWriter,
		store=store,
		base_dir=providers.Callable(photon_dir, config.vuln_list_dir),
	)
	splitter = providers.Factory(RecordSplitter)
	progress = providers.Factory(progress_sink, enabled=config.progress)

	update_uc = providers.Factory(
		UpdatePhotonUseCase,
		feed=feed,
		writer=writer,
		splitter=splitter,
		progress=progress,
	)
	list_versions_uc = providers.Factory(ListVersionsUseCase, feed=feed)
