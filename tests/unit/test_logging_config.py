"""
Unit tests for structlog configuration and processors.
"""

import logging

import structlog

from ccda_validation import __version__
from ccda_validation.logging_config import (
    add_service_context,
    configure_logging,
    mask_document_text,
)


class TestProcessors:
    """Test suite for custom structlog processors."""

    def test_add_service_context(self):
        event = add_service_context(None, "info", {"event": "x"})

        assert event["app"] == "ccda-validation-service"
        assert event["app_version"] == __version__

    def test_document_text_is_masked(self):
        event = mask_document_text(
            None,
            "info",
            {"event": "x", "document_text": "<ClinicalDocument/>", "objective": "C-CDA_IG_Only"},
        )

        assert event["document_text"] == "<19 chars>"
        assert event["objective"] == "C-CDA_IG_Only"

    def test_file_contents_are_masked(self):
        event = mask_document_text(None, "info", {"event": "x", "ccda_file_contents": b"<x/>"})

        assert event["ccda_file_contents"] == "<masked>"

    def test_events_without_documents_untouched(self):
        event = {"event": "Validation stage completed", "stage": "structural"}

        assert mask_document_text(None, "info", dict(event)) == event


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_root_level_and_handler(self):
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
        try:
            configure_logging("WARNING", "production")

            assert root_logger.level == logging.WARNING
            assert len(root_logger.handlers) == 1
            assert isinstance(
                root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
            )
            assert logging.getLogger("multipart").level == logging.WARNING
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)

    def test_unknown_level_falls_back_to_info(self):
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
        try:
            configure_logging("VERBOSE")

            assert root_logger.level == logging.INFO
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
