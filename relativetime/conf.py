from datetime import datetime
from functools import wraps

from .exceptions import SettingValidationError

default_settings = {
    "AGO_KEYWORDS": ["ago"],
    "PLURAL_SUFFIX": "s",
    "RELATIVE_BASE": None,
}


class Settings:
    """Control and configure default parsing behavior of relativetime.

    Currently supported settings:

    * `AGO_KEYWORDS`: words that negate the occurrence they follow.
    * `PLURAL_SUFFIX`: suffix tolerated after a unit alias.
    * `RELATIVE_BASE`: timestamp used when no base is given to ``apply``.
    """

    _default = True
    _mod_settings = {}

    def __init__(self, settings=None):
        if settings:
            self._updateall(settings.items())
        else:
            self._updateall(default_settings.items())

    def _updateall(self, iterable):
        for key, value in iterable:
            setattr(self, key, value)

    def replace(self, mod_settings=None, **kwds):
        for k, v in kwds.items():
            if v is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(k, v))

        for x in default_settings:
            value = getattr(self, x)
            kwds.setdefault(x, list(value) if isinstance(value, list) else value)

        kwds["_default"] = False
        if mod_settings:
            kwds.update(mod_settings)

        new_settings = Settings(settings=kwds)
        new_settings._default = False
        new_settings._mod_settings = mod_settings or {}
        check_settings(new_settings)
        return new_settings


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(mod_settings=mod_settings)

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        return f(*args, **kwargs)

    return wrapper


def _check_ago_keywords(setting_name, setting_value):
    if not isinstance(setting_value, list) or not setting_value:
        raise SettingValidationError(
            '"{}" must be a non-empty list of keywords.'.format(setting_name)
        )
    for keyword in setting_value:
        if not isinstance(keyword, str) or not keyword.strip() or len(keyword.split()) > 1:
            raise SettingValidationError(
                '"{}" contains an invalid keyword: {!r}.'.format(setting_name, keyword)
            )


def _check_plural_suffix(setting_name, setting_value):
    if any(ch.isspace() for ch in setting_value):
        raise SettingValidationError(
            '"{}" must not contain whitespace.'.format(setting_name)
        )


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    Only checks for the modified settings.
    """
    settings_values = {
        "AGO_KEYWORDS": {
            "type": list,
            "extra_check": _check_ago_keywords,
        },
        "PLURAL_SUFFIX": {
            "type": str,
            "extra_check": _check_plural_suffix,
        },
        "RELATIVE_BASE": {
            # "type": datetime or None
        },
    }

    modified_settings = settings._mod_settings
    for setting_name, setting_value in modified_settings.items():
        if setting_name not in settings_values:
            raise SettingValidationError(
                '"{}" is not a valid setting'.format(setting_name)
            )

        setting_type = type(setting_value).__name__
        if setting_name == "RELATIVE_BASE":
            if setting_value is not None and not isinstance(setting_value, datetime):
                raise SettingValidationError(
                    '"{}" must be a datetime or None, not "{}".'.format(
                        setting_name, setting_type
                    )
                )
            continue

        expected_type = settings_values[setting_name]["type"]
        if not isinstance(setting_value, expected_type):
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, expected_type.__name__, setting_type
                )
            )

        extra_check = settings_values[setting_name].get("extra_check")
        if extra_check:
            extra_check(setting_name, setting_value)
