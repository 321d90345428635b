import os

from .config import ProjectConfig
from .errors import (
    DirectoryNotFound,
    FileNotFoundForLanguage,
    MalformedJson,
    MissingExtension,
    ParseError,
    UnreadableFile,
    UnsupportedExtension,
)
from .meta import ProjectMeta
from .values import parse_json

SUPPORTED_EXTENSIONS = ('json',)


# region ====== File selection ======
# "en_US.json" -> "en_US", ".hidden.json" -> ".hidden"
def file_prefix(file_name):
    if file_name.startswith('.'):
        return '.' + file_name[1:].split('.', 1)[0]
    return file_name.split('.', 1)[0]


# "en_US.json" -> "json", "en_US" -> None, ".hidden" -> None
def file_extension(file_name):
    _, extension = os.path.splitext(file_name)
    return extension[1:] if extension else None


def find_language_file(dir_path, lang):
    """Path of the file in dir_path named lang, whatever its extension"""
    try:
        file_names = sorted(os.listdir(dir_path))
    except OSError as e:
        raise DirectoryNotFound(dir_path, e.strerror or e) from e

    for file_name in file_names:
        path = os.path.join(dir_path, file_name)
        if file_prefix(file_name) == lang and os.path.isfile(path):
            return path

    raise FileNotFoundForLanguage(dir_path, lang)

# endregion


# region ====== Generation ======
def build_namespace(value, file_name, config=None, style_sheet=None):
    """Namespace tree of a parsed document, file_name names a bare root value"""
    config = config or ProjectConfig()
    if style_sheet is None:
        style_sheet = config.load_style_sheet()
    try:
        return ProjectMeta(value, file_name, config, style_sheet)
    except RecursionError as e:
        # each nesting level costs several frames, json.loads goes deeper than the builder
        raise MalformedJson('nesting too deep') from e


def render(namespace:ProjectMeta):
    try:
        return namespace.tagging(0)
    except RecursionError as e:
        raise MalformedJson('nesting too deep', namespace.file_name) from e


def parse_from_text(text, file_name, config=None):
    try:
        return build_namespace(parse_json(text), file_name, config)
    except ParseError as e:
        if e.file_name is None:
            e.file_name = file_name
        raise


def parse_from_file(path, config=None):
    base_name = os.path.basename(path)
    file_name = file_prefix(base_name)

    extension = file_extension(base_name)
    if extension is None:
        raise MissingExtension(base_name)
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedExtension(base_name, extension)

    try:
        with open(path, 'rb') as file:
            data = file.read()
    except OSError as e:
        raise UnreadableFile(base_name, e.strerror or e) from e

    try:
        return parse_from_text(data, file_name, config)
    except ParseError as e:
        # report the full file name, en_US.json instead of en_US
        e.file_name = base_name
        raise


def generate_from_text(text, file_name, config=None):
    return render(parse_from_text(text, file_name, config))


def generate(dir_path, lang, config=None):
    """Generated source text for the lang file found in dir_path"""
    path = find_language_file(dir_path, lang)
    return render(parse_from_file(path, config))


def get_output_path(output_dir, lang, config=None):
    config = config or ProjectConfig()
    style_sheet = config.load_style_sheet()
    template = style_sheet.get('output_file_template') or '%(lang)s.txt'
    return os.path.join(output_dir, template % {'lang': lang})


def write_generated(dir_path, lang, output_dir, config=None):
    content = generate(dir_path, lang, config)
    output_path = get_output_path(output_dir, lang, config)

    os.makedirs(output_dir, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(content)
    return output_path

# endregion
