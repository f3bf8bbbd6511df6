from __future__ import annotations

import pytest

import stimulus


def test_lazy_exports_resolve() -> None:
    assert set(stimulus.AVAILABLE_MODES) == {"horizontal", "circular", "jump", "random"}
    assert stimulus.get_mode("jump") is stimulus.AVAILABLE_MODES["jump"]
    assert stimulus.progress_from_elapsed(500, 1000) == 0.5


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError):
        stimulus.does_not_exist


def test_dir_lists_public_api() -> None:
    names = dir(stimulus)
    assert "sample_path" in names
    assert "__version__" in names
