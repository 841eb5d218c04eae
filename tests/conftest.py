from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from esbridge.models import ArgumentDoc, ClassDoc, MethodDoc, PropertyDoc
from tests._fixtures.class_reference import ClassReferenceBuilder


@pytest.fixture
def class_reference(tmp_path: Path) -> ClassReferenceBuilder:
    """Provide a class reference directory rooted at the pytest tmp_path."""
    return ClassReferenceBuilder(tmp_path)


@pytest.fixture
def sprite_doc() -> ClassDoc:
    return ClassDoc(
        name="Sprite",
        inherits="Node2D",
        brief_description="General-purpose sprite node.",
        properties=(PropertyDoc(name="texture", type="Texture", description="Texture to draw."),),
        methods=(
            MethodDoc(
                name="play",
                arguments=(ArgumentDoc(name="name", type="String", default_value='"default"'),),
                description="Plays an animation.",
            ),
        ),
    )


@pytest.fixture(autouse=True)
def _reset_esbridge_logging() -> Iterator[None]:
    """Drop handlers installed by CLI runs so they never outlive captured streams."""
    yield
    logger = logging.getLogger("esbridge")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
