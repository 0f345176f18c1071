class Character:
    """Space and Line-break characters"""

    CR = "\r"
    LF = "\n"
    CRLF = CR + LF
    SPACE = " "
    TAB = "\t"
    SPACEORTAB = SPACE + TAB
    DQUOTE = '"'
    BOM = "\ufeff"


class Delimiter:
    """Separators of the content line grammar"""

    VALUE = ":"
    PARAM = ";"
    PARAM_VALUE = "="
    LIST = ","
    PERIOD = "/"
    EXTENSION_PREFIX = "X-"
