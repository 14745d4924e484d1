"""Named parameter substitution for resolved templates.

Two placeholder grammars are recognized in the same template:

- ``{identifier}``
- ``:identifier``

where identifier is one or more ASCII letters, digits or underscores.
Substitution is a single left-to-right scan: replacement values are copied
to the output and never scanned again, so a value containing placeholder
syntax is inserted literally.
"""

from typing import Any, List, Mapping, Optional, Tuple


def _is_identifier_char(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9")


def _scan_identifier(template: str, start: int) -> int:
    """Return the index just past the identifier beginning at ``start``."""
    end = start
    length = len(template)
    while end < length and _is_identifier_char(template[end]):
        end += 1
    return end


def _match_placeholder(template: str, index: int) -> Optional[Tuple[str, int]]:
    """Match a placeholder at ``index``.

    Returns:
        ``(identifier, end_index)`` if a well-formed placeholder starts at
        ``index``, otherwise None.
    """
    char = template[index]
    if char == "{":
        end = _scan_identifier(template, index + 1)
        if end > index + 1 and end < len(template) and template[end] == "}":
            return template[index + 1 : end], end + 1
        return None
    if char == ":":
        end = _scan_identifier(template, index + 1)
        if end > index + 1:
            return template[index + 1 : end], end
    return None


class Interpolator:
    """Single-pass scanner substituting named parameters into templates.

    Unknown placeholders and malformed placeholder syntax are left in the
    output verbatim; substitution never fails.
    """

    def substitute(self, template: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Substitute ``params`` into ``template``.

        Args:
            template: Resolved template text.
            params: Placeholder identifier -> replacement value. Values are
                rendered with ``str()``.

        Returns:
            Template with every known placeholder replaced.

        Example:
            >>> Interpolator().substitute("Hello {name}", {"name": "Ana"})
            'Hello Ana'
            >>> Interpolator().substitute("Hi :name", {})
            'Hi :name'
        """
        if not params:
            return template

        output: List[str] = []
        length = len(template)
        index = 0
        literal_start = 0

        while index < length:
            if template[index] not in "{:":
                index += 1
                continue

            match = _match_placeholder(template, index)
            if match is None:
                index += 1
                continue

            identifier, end = match
            if identifier in params:
                output.append(template[literal_start:index])
                output.append(str(params[identifier]))
                literal_start = end
            index = end

        output.append(template[literal_start:])
        return "".join(output)

    def placeholders(self, template: str) -> List[str]:
        """List placeholder identifiers in order of first appearance."""
        found: List[str] = []
        length = len(template)
        index = 0
        while index < length:
            if template[index] in "{:":
                match = _match_placeholder(template, index)
                if match is not None:
                    identifier, index = match
                    if identifier not in found:
                        found.append(identifier)
                    continue
            index += 1
        return found
