"""Unit test fixtures (stub adapter modules).

Provides an importable in-memory module holding adapter classes, so dotted
import paths can be resolved without a real validation engine installed.
"""

import sys
import types

import pytest

from ccda_validation.adapters.base import (
    ContentValidationOutcome,
    ContentValidator,
    StructuralValidationOutcome,
    StructuralValidator,
    VocabularyValidationOutcome,
    VocabularyValidator,
)

ENGINE_MODULE = "stub_ccda_engines"


class StubStructuralValidator(StructuralValidator):
    def validate(self, objective, reference_id, document_text, severity_level):
        return StructuralValidationOutcome(document_type="Continuity Of Care Document")


class StubVocabularyValidator(VocabularyValidator):
    def validate(self, objective, reference_id, document_text, vocabulary_config, severity_level):
        return VocabularyValidationOutcome()


class StubContentValidator(ContentValidator):
    def validate(
        self,
        objective,
        reference_id,
        document_text,
        cures_update,
        svap_2022,
        svap_2023,
        uscdi_v4,
        severity_level,
    ):
        return ContentValidationOutcome()


@pytest.fixture
def engine_module(monkeypatch):
    """Register `stub_ccda_engines` in sys.modules for the duration of a test.

    Exposes the three stub classes, a ready instance (`shared_structural`) and
    an object that is not an adapter (`not_an_adapter`).
    """
    module = types.ModuleType(ENGINE_MODULE)
    module.StubStructuralValidator = StubStructuralValidator
    module.StubVocabularyValidator = StubVocabularyValidator
    module.StubContentValidator = StubContentValidator
    module.shared_structural = StubStructuralValidator()
    module.not_an_adapter = object()
    monkeypatch.setitem(sys.modules, ENGINE_MODULE, module)
    return module
