"""
Path grammar for route patterns.

Grammar Specification
=====================

Patterns are parsed byte by byte over their UTF-8 encoding::

    path             = "/" [ segment-or-param ( "/" segment-or-param )* ]
    segment-or-param = segment | param
    segment          = pchar*
    pchar            = unreserved | pct-encoded | sub-delims | ":" | "@"
    unreserved       = ALPHA | DIGIT | "-" | "." | "_" | "~"
    pct-encoded      = "%" HEXDIG HEXDIG
    sub-delims       = "!" | "$" | "&" | "'" | "(" | ")"
                     | "*" | "+" | "," | ";" | "="
    param            = "{" WSP* name WSP* "}"
    name             = ALPHA ( ALPHA | DIGIT )*

``segment``, ``pchar``, ``unreserved``, ``pct-encoded`` and ``sub-delims``
follow RFC 3986 sections 2 and 3.3.

Rules not expressed by the grammar
==================================
- The first segment must not be empty, so ``//x`` is rejected.
  ``/`` alone is the root pattern and has no parts.
- A param occupies a whole segment; ``/a{id}`` and ``/{id}x`` are errors.
- Percent escapes are validated but never decoded.

Examples
========
/
/users
/users/{id}
/users/{ id }/posts/{post}
/files/report%20final.pdf
"""

SLASH = 0x2F        # /
LBRACE = 0x7B       # {
RBRACE = 0x7D       # }
PERCENT = 0x25      # %

WHITESPACE = frozenset(b" \t")

ALPHA = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
DIGIT = frozenset(b"0123456789")
ALNUM = ALPHA | DIGIT
HEXDIG = DIGIT | frozenset(b"ABCDEFabcdef")

UNRESERVED = ALNUM | frozenset(b"-._~")
SUB_DELIMS = frozenset(b"!$&'()*+,;=")

# Every pchar that is a single byte; pct-encoded triples are handled apart.
PCHAR = UNRESERVED | SUB_DELIMS | frozenset(b":@")
