import logging


def test_import_bakusave_package() -> None:
    import importlib

    module = importlib.import_module("bakusave")
    assert module is not None
    for name in module.__all__:
        assert hasattr(module, name), name


def test_public_codec_boundary_round_trip() -> None:
    import bakusave

    ctx = bakusave.resolve_context("ps3")
    buffer = bytearray(13952)

    bakusave.write_player_name(buffer, ctx, "Dan")

    assert bakusave.read_player_name(buffer, ctx) == "Dan"


def test_package_logger_is_silent_by_default() -> None:
    from bakusave.core.log import get_logger

    logger = get_logger("services.test")

    assert logger.name == "bakusave.services.test"
    assert any(isinstance(handler, logging.NullHandler) for handler in logging.getLogger("bakusave").handlers)
    assert get_logger() is logging.getLogger("bakusave")
