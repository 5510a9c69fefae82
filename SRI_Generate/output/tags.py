STYLESHEET_TAG = "<link rel='stylesheet' href='{source}' integrity='{digest}'>"
SCRIPT_TAG = "<script src='{source}' integrity='{digest}'></script>"


def generate_tag(source: str, file_name: str, digest: str) -> str:
    """
    Render the markup that references `source` with an integrity attribute.

    Stylesheets (.css) get a <link>, everything else a <script>.
    """
    template = STYLESHEET_TAG if file_name.lower().endswith(".css") else SCRIPT_TAG
    return template.format(source=source, digest=digest)
