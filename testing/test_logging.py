"""Package logging setup and solver log output."""

import logging

import pytest

from saggy import (
    Creep,
    NonConvergentSolveError,
    SolverConfig,
    Weather,
    Wire,
    analyze_span,
    calculate_elastic_tension,
    setup_logging,
)


@pytest.fixture
def saggy_logger():
    logger = logging.getLogger("saggy")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_setup_is_idempotent(saggy_logger: logging.Logger) -> None:
    setup_logging()
    logger = setup_logging(level=logging.DEBUG)

    assert logger is saggy_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file(saggy_logger: logging.Logger, tmp_path) -> None:
    path = tmp_path / "saggy.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(path))

    assert len(logger.handlers) == 2
    logger.handlers[1].flush()
    assert "Logging initialized." in path.read_text(encoding="utf-8")


def test_setup_replaces_file_handler(saggy_logger: logging.Logger, tmp_path) -> None:
    setup_logging(log_file=str(tmp_path / "first.log"))
    logger = setup_logging()

    assert len(logger.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_non_convergence_is_logged(caplog, wire: Wire, creep: Creep, ice_weather: Weather) -> None:
    with caplog.at_level(logging.WARNING, logger="saggy"):
        with pytest.raises(NonConvergentSolveError):
            calculate_elastic_tension(ice_weather, wire, creep, SolverConfig(max_iterations=1))

    assert any(
        record.levelno == logging.WARNING and "did not converge" in record.getMessage()
        for record in caplog.records
    )


def test_solved_span_is_logged(caplog, wire: Wire, creep: Creep, ice_weather: Weather) -> None:
    with caplog.at_level(logging.INFO, logger="saggy"):
        analyze_span(ice_weather, wire, creep)

    assert "Heavy ice (final)" in caplog.text
