"""Infrastructure modules for the translation service.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging setup and request context (get_module_logger)
- i18n: Translation discovery, locale merging, resolution and client delivery
- services: Dependency injection services (SettingsDep, I18nServiceDep, get_settings)

Subpackages are imported explicitly (e.g. ``from infrastructure.i18n import
make_translator``); this package does not re-export them.
"""
