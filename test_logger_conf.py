# test_logger_conf.py
import logging

from logger_conf import ROOT_LOGGER, get_logger


def test_module_loggers_are_children_of_the_project_logger():
    log = get_logger("controller")

    assert log.name == f"{ROOT_LOGGER}.controller"
    assert log.handlers == []
    assert log.parent is logging.getLogger(ROOT_LOGGER)


def test_project_logger_is_configured_once():
    first = list(get_logger().handlers)
    get_logger("trending")
    assert get_logger().handlers == first
    assert any(isinstance(h, logging.StreamHandler) for h in first)


def test_prefixed_names_are_not_doubled():
    assert get_logger(f"{ROOT_LOGGER}.app").name == f"{ROOT_LOGGER}.app"
