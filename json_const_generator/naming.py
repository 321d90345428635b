from enum import Enum

from .errors import InvalidIdentifier


class IdentifierPolicy(Enum):
    REJECT = 0
    SUBSTITUTE = 1


# Constants are shouted, the key is only case folded: "foo_bar" -> "FOO_BAR", "fooBar" -> "FOOBAR"
def normalize_constant(key: str) -> str:
    return key.upper()


# Namespaces keep the casing of the key
def normalize_namespace(key: str) -> str:
    return key


def check_identifier(identifier, reserved_words=(), forbidden_prefixes=()):
    """Returns the reason why identifier is illegal, or None"""
    if identifier == '':
        return 'empty identifier'
    if not identifier.isidentifier():
        return 'contains characters not allowed in an identifier'
    if identifier in reserved_words:
        return 'reserved word of the target language'
    for prefix in forbidden_prefixes:
        if identifier.startswith(prefix):
            return f'starts with {prefix!r}, which the target language treats specially'
    return None


def sanitize_identifier(identifier, reserved_words=(), forbidden_prefixes=()):
    chars = []
    for ch in identifier:
        # '_' + ch tells whether ch may continue an identifier
        chars.append(ch if ('_' + ch).isidentifier() else '_')
    sanitized = ''.join(chars)

    if not sanitized[:1].isidentifier():
        sanitized = '_' + sanitized

    # "__X" -> "_X", "___X" -> "_X"
    for prefix in forbidden_prefixes:
        while len(prefix) > 1 and sanitized.startswith(prefix):
            sanitized = '_' + sanitized[len(prefix):]

    if sanitized in reserved_words:
        sanitized += '_'
    return sanitized


def legalize_identifier(identifier, location, reserved_words=(), policy=IdentifierPolicy.REJECT,
                        forbidden_prefixes=()):
    reason = check_identifier(identifier, reserved_words, forbidden_prefixes)
    if reason is None:
        return identifier

    if policy == IdentifierPolicy.SUBSTITUTE:
        return sanitize_identifier(identifier, reserved_words, forbidden_prefixes)

    raise InvalidIdentifier(identifier, location, reason)
