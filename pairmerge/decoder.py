from .vocabulary import InvalidReferenceError, Vocabulary


def decode(vocabulary: Vocabulary, symbol_id: int) -> str:
    """
    Expand a symbol id into the text it stands for. Base symbols are code
    points; composite symbols are the concatenation of their two parents.

    Expansion walks an explicit stack, so merge chains deeper than the
    interpreter's recursion limit still decode.
    """
    chars: list[str] = []
    stack = [symbol_id]
    while stack:
        current = stack.pop()
        pair = vocabulary.definition(current)
        if pair is None:
            chars.append(chr(current))
            continue

        left, right = pair
        # Right is pushed first so that left is expanded first.
        stack.append(right)
        stack.append(left)

    return "".join(chars)


def decode_all(vocabulary: Vocabulary) -> dict[int, str]:
    """
    Decode every symbol, ascending by id. Parents always come before their
    children, so each composite is built from two already-decoded strings.

    Two ids may decode to the same text; both are kept here.
    """
    res: dict[int, str] = {}
    for symbol_id, pair in vocabulary.definitions.items():
        if pair is None:
            res[symbol_id] = chr(symbol_id)
            continue

        left, right = pair
        for parent in pair:
            if parent not in res:
                raise InvalidReferenceError(parent)
        res[symbol_id] = res[left] + res[right]

    return res
