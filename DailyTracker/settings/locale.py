"""
Module for locale-aware formatting and calendar conventions using Babel.

"""
import datetime
import logging
from typing import List

from babel import Locale, UnknownLocaleError, numbers
from babel.dates import format_date

DEFAULT_LOCALE: str = 'en_US'

CURRENCY_MAP: dict[str, str] = {
    'US': 'USD',
    'GB': 'GBP',
    'DE': 'EUR',
    'FR': 'EUR',
    'BE': 'EUR',
    'IT': 'EUR',
    'ES': 'EUR',
    'JP': 'JPY',
    'CA': 'CAD',
    'AU': 'AUD',
    'IN': 'INR',
    'BR': 'BRL',
    'RU': 'RUB',
    'CN': 'CNY',
    'KR': 'KRW',
    'DK': 'DKK',
    'SE': 'SEK',
    'NO': 'NOK',
    'FI': 'EUR',
    'HU': 'HUF',
    'MX': 'MXN',
    'ID': 'IDR',
    'SA': 'SAR',
    'ZA': 'ZAR',
    'TR': 'TRY',
    'NL': 'EUR',
}

LOCALE_MAP: List[str] = [
    "en_GB",
    "de_DE",
    "es_ES",
    "hu_HU",
    "ar_SA",
    "da_DK",
    "en_AU",
    "en_CA",
    "en_IN",
    "en_US",
    "en_ZA",
    "es_MX",
    "fi_FI",
    "fr_BE",
    "fr_FR",
    "id_ID",
    "it_IT",
    "ja_JP",
    "ko_KR",
    "nb_NO",
    "nl_NL",
    "pt_BR",
    "ru_RU",
    "sv_SE",
    "tr_TR",
    "zh_CN",
]


def parse_locale(locale: str) -> Locale:
    """
    Parse a locale string, falling back to :data:`DEFAULT_LOCALE` when it is unknown.

    Args:
        locale (str): Locale string, e.g. 'de_DE'.

    Returns:
        Locale: The parsed Babel locale.
    """
    try:
        return Locale.parse(locale)
    except (ValueError, TypeError, UnknownLocaleError) as ex:
        logging.warning(f'Unknown locale "{locale}" ({ex}), using {DEFAULT_LOCALE}.')
        return Locale.parse(DEFAULT_LOCALE)


def get_currency_from_locale(locale: str) -> str:
    """
    Retrieve the default currency code based on the locale's territory.

    Args:
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: Currency code such as 'EUR'. Defaults to 'EUR' if the territory is unknown.
    """
    parts = locale.split('_')
    if len(parts) < 2:
        return 'EUR'
    country_code = parts[1]
    return CURRENCY_MAP.get(country_code, 'EUR')


def format_float(value: float, locale: str) -> str:
    """
    Format a float as a decimal string according to the locale conventions.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'en_US'.

    Returns:
        str: The formatted decimal string.
    """
    try:
        return numbers.format_decimal(value, locale=parse_locale(locale))
    except (ValueError, TypeError) as ex:
        logging.debug(f'Error formatting decimal: {ex}')
        return str(value)


def format_currency_value(value: float, locale: str) -> str:
    """
    Format a float as a currency string based on the locale's default currency.

    The default currency is determined by the territory extracted from the locale.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: The formatted currency string.
    """
    try:
        currency_code = get_currency_from_locale(locale)
        return numbers.format_currency(value, currency=currency_code, locale=parse_locale(locale))
    except (ValueError, TypeError) as ex:
        logging.debug(f'Error formatting currency: {ex}')
        return str(value)


def first_week_day(locale: str) -> int:
    """
    The first day of the week for a locale, as a :meth:`datetime.date.weekday` number.

    Args:
        locale (str): Locale string, e.g. 'en_US'.

    Returns:
        int: 0 for Monday through 6 for Sunday.
    """
    return parse_locale(locale).first_week_day


def short_weekday_name(day: datetime.date, locale: str) -> str:
    """
    Abbreviated weekday name of ``day`` in the given locale, e.g. 'Mon'.
    """
    return format_date(day, 'EEE', locale=parse_locale(locale))
