"""Tests for the two-state edit session."""

from pathlib import Path

import pytest

from iEdit.core.filters import FilterKind
from iEdit.core.filters.algorithms import unpack_argb
from iEdit.core.pixel_buffer import PixelBuffer
from iEdit.core.session import EditSession, SessionState
from iEdit.errors import NoImageLoadedError


@pytest.fixture
def session():
    return EditSession()


def test_new_session_is_empty(session):
    assert session.state is SessionState.EMPTY
    assert not session.has_image
    assert session.source is None


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.apply_filter(FilterKind.INVERT),
        lambda s: s.apply_filter(FilterKind.GRAYSCALE),
        lambda s: s.reset_to_original(),
        lambda s: s.get_current(),
        lambda s: s.snapshot(),
        lambda s: s.is_modified(),
    ],
)
def test_operations_fail_while_empty(session, operation):
    with pytest.raises(NoImageLoadedError):
        operation(session)
    assert session.state is SessionState.EMPTY


def test_load_copies_buffer_into_current(session, sample_buffer):
    expected = sample_buffer.copy()
    session.load(sample_buffer, source="photo.png")

    assert session.state is SessionState.LOADED
    assert session.has_image
    assert session.source == Path("photo.png")
    current = session.get_current()
    assert current == expected
    assert current is not sample_buffer
    assert not current.frozen
    assert not session.is_modified()


def test_load_freezes_the_original_snapshot(session, sample_buffer):
    session.load(sample_buffer)
    assert sample_buffer.frozen


def test_filters_mutate_current_only(session, sample_buffer):
    expected_original = sample_buffer.copy()
    session.load(sample_buffer)
    session.apply_filter(FilterKind.INVERT)

    current = session.get_current()
    assert unpack_argb(current.get_pixel(0, 0)) == (255, 245, 235, 225)
    assert sample_buffer == expected_original
    assert session.is_modified()


def test_reset_restores_original_bit_for_bit(session, sample_buffer):
    expected = sample_buffer.copy()
    session.load(sample_buffer)
    session.apply_filter(FilterKind.INVERT)
    session.apply_filter(FilterKind.GRAYSCALE)

    session.reset_to_original()

    assert session.get_current() == expected
    assert not session.is_modified()
    # The restored buffer is a fresh copy that can be filtered again.
    session.apply_filter(FilterKind.INVERT)
    assert session.get_current() != expected


def test_reload_replaces_both_buffers(session, sample_buffer):
    session.load(sample_buffer, source="first.png")
    session.apply_filter(FilterKind.INVERT)

    replacement = PixelBuffer.create(4, 3)
    session.load(replacement, source="second.png")

    current = session.get_current()
    assert (current.width, current.height) == (4, 3)
    assert current == PixelBuffer.create(4, 3)
    assert session.source == Path("second.png")
    session.reset_to_original()
    assert session.get_current() == PixelBuffer.create(4, 3)


def test_current_keeps_original_dimensions(session, sample_buffer):
    session.load(sample_buffer)
    for kind in (FilterKind.GRAYSCALE, FilterKind.INVERT):
        session.apply_filter(kind)
        current = session.get_current()
        assert (current.width, current.height) == (2, 1)


def test_snapshot_is_independent(session, sample_buffer):
    session.load(sample_buffer)
    snapshot = session.snapshot()
    snapshot.set_pixel(0, 0, 0)
    assert session.get_current().get_pixel(0, 0) != 0


def test_load_rejects_non_buffers(session):
    with pytest.raises(TypeError):
        session.load([[0, 0]])
    assert session.state is SessionState.EMPTY
