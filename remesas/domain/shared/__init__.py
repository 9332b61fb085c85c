"""
Utilidades compartidas del dominio.

Estas funciones no dependen de ninguna librería externa. Solo operan sobre
tipos nativos de Python.

Uso:
    from remesas.domain.shared.fields import get_string, get_date, get_money, get_int
    from remesas.domain.shared.money import parse_cents, cents_to_decimal, format_money
    from remesas.domain.shared.date_parser import parse_compact_date
    from remesas.domain.shared.text_cleaner import strip_sepa, normalize_line_endings
"""
