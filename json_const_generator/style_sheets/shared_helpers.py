"""
Shared helper functions for json_const_generator style sheets
Contains the string literal writers selected by the `string_literal` option of a style sheet
(rust.yaml, python.yaml, cpp.yaml) and small helpers usable from the file templates.
"""

def escape_rust(text):
    """Escape text for a Rust "..." literal"""
    result = ''
    for ch in text:
        if ch == '\\':
            result += '\\\\'
        elif ch == '"':
            result += '\\"'
        elif ch == '\n':
            result += '\\n'
        elif ch == '\r':
            result += '\\r'
        elif ch == '\t':
            result += '\\t'
        elif ch == '\0':
            result += '\\0'
        elif ord(ch) < 0x20 or ord(ch) == 0x7f:
            result += '\\u{%x}' % ord(ch)
        else:
            result += ch
    return result

def escape_python(text):
    """Escape text for a Python "..." literal, non-ASCII characters are kept as is"""
    result = ''
    for ch in text:
        if ch == '\\':
            result += '\\\\'
        elif ch == '"':
            result += '\\"'
        elif ch == '\n':
            result += '\\n'
        elif ch == '\r':
            result += '\\r'
        elif ch == '\t':
            result += '\\t'
        elif ord(ch) < 0x20 or ord(ch) == 0x7f:
            result += '\\x%02x' % ord(ch)
        else:
            result += ch
    return result

def escape_cpp(text):
    """Escape text for a C++ "..." literal

    Octal escapes are used for control characters since a hex escape would swallow following hex digits.
    '?' is escaped to avoid trigraphs.
    """
    result = ''
    for ch in text:
        if ch == '\\':
            result += '\\\\'
        elif ch == '"':
            result += '\\"'
        elif ch == '?':
            result += '\\?'
        elif ch == '\n':
            result += '\\n'
        elif ch == '\r':
            result += '\\r'
        elif ch == '\t':
            result += '\\t'
        elif ord(ch) < 0x20 or ord(ch) == 0x7f:
            result += '\\%03o' % ord(ch)
        else:
            result += ch
    return result

string_escapers = {
    'rust': escape_rust,
    'python': escape_python,
    'cpp': escape_cpp,
}

def string_literal(text, mode):
    """Quoted string literal of text for the given string_literal mode"""
    escaper = string_escapers.get(mode)
    if escaper is None:
        raise KeyError('Unknown string literal mode %s' % mode)
    return '"' + escaper(text) + '"'

def header_comment(comment_prefix, generator, source_name):
    """The 'do not edit' banner placed at the top of generated files"""
    return f'{comment_prefix} Generated by {generator} from {source_name}. Do not edit.'

def include_guard(lang):
    """Include guard macro for C-like headers, i.e. en_US -> LANG_EN_US_HPP"""
    name = ''.join(ch if ch.isalnum() else '_' for ch in lang.upper())
    return f'LANG_{name}_HPP'
