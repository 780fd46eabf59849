"""
Utilidades compartidas del dominio.

Estas funciones son usadas por los bank parsers y la carga rápida, y no
dependen de ninguna librería externa. Solo operan sobre tipos nativos.

Uso:
    from src.domain.shared.money import parse_locale_amount, format_money
    from src.domain.shared.date_parser import parse_numeric_date, parse_abbreviated_month_date
    from src.domain.shared.text_cleaner import clean_whitespace, section_between
    from src.domain.shared.statement_text import split_rows, extract_row_tokens
"""
