import pytest

import flags


@pytest.fixture(scope="function", autouse=True)
def default_registry():
    """Fixture that gives each test an empty default registry that raises on parse
    errors instead of exiting."""
    original_exit_on_error = flags.FLAGS.exit_on_error
    original_usage_info = flags.FLAGS.usage_info
    flags.reset()
    flags.set_exit_on_error(False)
    yield flags.FLAGS
    flags.reset()
    flags.set_exit_on_error(original_exit_on_error)
    flags.set_usage_info(original_usage_info)
