import os

import yaml

from .errors import StyleSheetError, StyleSheetNotFound
from .naming import IdentifierPolicy

DEFAULT_NAMESPACE = 'lang'
DEFAULT_STYLE = 'rust'

STYLE_SHEETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'style_sheets')


# region ====== Configuration ======
class ProjectConfig:
    def __init__(self, style=DEFAULT_STYLE, style_sheet_path=None, root_namespace=None,
                 identifier_policy=IdentifierPolicy.REJECT):
        # name of a bundled style sheet: rust, python, cpp
        self.style = style
        # a custom style sheet file, takes precedence over style
        self.style_sheet_path = style_sheet_path
        # None renders the root as DEFAULT_NAMESPACE
        self.root_namespace = root_namespace
        self.identifier_policy = identifier_policy

    def load_style_sheet(self):
        if self.style_sheet_path:
            return load_style_sheet_file(self.style_sheet_path)
        return load_style_sheet(self.style)

# endregion


# region ====== Style sheets ======
def available_style_sheets():
    names = []
    for file in sorted(os.listdir(STYLE_SHEETS_DIR)):
        if file.endswith('.yaml'):
            names.append(file[:-len('.yaml')])
    return names


def load_style_sheet(style_name):
    path = os.path.join(STYLE_SHEETS_DIR, f'{style_name}.yaml')
    if style_name not in available_style_sheets():
        raise StyleSheetNotFound(style_name)
    return load_style_sheet_file(path)


def load_style_sheet_file(path):
    if not os.path.isfile(path):
        raise StyleSheetNotFound(path)

    try:
        with open(path, 'r', encoding='utf-8') as file:
            style = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise StyleSheetError(f'Cannot load style sheet {path} cause {e}') from e
    except OSError as e:
        raise StyleSheetError(f'Cannot read style sheet {path} cause {e}') from e

    if not isinstance(style, dict):
        raise StyleSheetError(f'Style sheet {path} must be a mapping')
    return style

# endregion
