"""Human-readable rendering of matrices."""


def describe(matrix):
    """
    Render a matrix as tab-separated rows framed by bracket glyphs.

    A single row is framed with ``(`` and ``)``; taller matrices use the
    upper, middle and lower bracket pieces. Each row ends with a newline.

    Parameters
    ----------
    matrix : Matrix

    Returns
    -------
    str
    """
    lines = []
    rows = matrix.rows()
    last = len(rows) - 1
    for i, row in enumerate(rows):
        contents = "\t".join(repr(v) for v in row)
        if last == 0:
            left, right = "(", ")"
        elif i == 0:
            left, right = "⎛", "⎞"
        elif i == last:
            left, right = "⎝", "⎠"
        else:
            left, right = "⎜", "⎥"
        lines.append(f"{left}\t{contents}\t{right}\n")
    return "".join(lines)
