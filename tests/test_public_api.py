"""Tests for package exports."""


def test_public_api_exports():
    from redwood import DefaultState, VisibilityFilter, __version__
    from redwood.io import (
        CHANNELS,
        DBG,
        EMPTY,
        ERR,
        FORCE,
        WARN,
        HandlerChain,
        RecordHandler,
        channels_of,
        is_forced,
        setup_logging,
        tag,
    )
    from redwood.io import DefaultState as IODefaultState

    assert IODefaultState is DefaultState
    assert __version__
    exports = [
        VisibilityFilter,
        CHANNELS,
        DBG,
        EMPTY,
        ERR,
        FORCE,
        WARN,
        HandlerChain,
        RecordHandler,
        channels_of,
        is_forced,
        setup_logging,
        tag,
    ]
    assert all(e is not None for e in exports)
