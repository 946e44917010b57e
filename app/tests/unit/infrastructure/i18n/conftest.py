"""Feature-level fixtures for i18n system tests.

Provides locale trees on disk and configured services for translation scenarios.
"""

import pytest

from infrastructure.i18n import FallbackOptions, I18nService
from tests.factories.i18n import make_i18n_options, make_locales_tree


@pytest.fixture
def locales_dir(tmp_path):
    """Create a temporary locales tree.

    Returns a directory structure like:
    - en/common.json
    - en/common/actions.json
    - en/features/dashboard.yml
    - es/common.json (missing "goodbye")
    - es/common/actions.json (missing "cancel")
    - es/features/dashboard.yml (missing "stats.users")
    """
    return make_locales_tree(tmp_path / "locales")


@pytest.fixture
def i18n_options(locales_dir):
    """Development options with fallback enabled."""
    return make_i18n_options(
        locales_dir,
        fallback=FallbackOptions(enabled=True, show_indicator=True),
    )


@pytest.fixture
def i18n_service(i18n_options):
    """I18nService over the temporary locales tree."""
    return I18nService(i18n_options)


@pytest.fixture
def production_service(locales_dir):
    """I18nService using production behavior with fallback indicators."""
    return I18nService(
        make_i18n_options(
            locales_dir,
            production=True,
            fallback=FallbackOptions(enabled=True, show_indicator=True),
        )
    )
