from mako.exceptions import RichTraceback
from mako.template import Template

from .classifier import Array, classify_and_render
from .config import DEFAULT_NAMESPACE
from .errors import ArrayRootContainsNonObject, DuplicateIdentifier, GeneratorError, StyleSheetError
from .naming import legalize_identifier, normalize_constant, normalize_namespace
from .style_sheets import shared_helpers as shared
from .values import JsonArray, JsonObject, kind_name

GENERATOR = 'json-const-generator'


# key path of a member, i.e. dummy.some, [1].ping
def join_location(location, key):
    if not location:
        return key
    return f'{location}.{key}'


# region ============= Meta process ==============
# Base Meta class
class MetaInfo:
    def __init__(self, ast_name, parent, value=None, location=''):
        self.parent = parent
        self.value = value

        # the JSON key (or file name) the meta comes from
        self.ast_name = ast_name
        self.location = location
        self.identifier = ''

        self.process()

    def process(self):
        pass

    def get_project(self):
        return self.parent.get_project()

    # region ====== Style ======
    def get_style(self, style_name, recursive=True):
        style_sheet = self.get_project().style_sheet

        # uses self's class name to find the style
        style = style_sheet.get(self.__class__.__name__)
        if style is not None and style_name in style:
            return style.get(style_name)

        if recursive:
            # not found, try base classes' style
            for base_class in self.__class__.__mro__[1:]:
                if base_class is object:
                    continue

                base_style = style_sheet.get(base_class.__name__)
                if base_style is not None and style_name in base_style:
                    return base_style.get(style_name)

        return None

    def get_sheet_option(self, option_name, default=None):
        value = self.get_project().style_sheet.get(option_name)
        return default if value is None else value

    def get_indent_space(self):
        return self.get_style('indent_space') or 4

    def get_required_style(self, style_name):
        style = self.get_style(style_name)
        if style is None:
            raise StyleSheetError(f'{self.__class__.__name__}.{style_name} is missing in style sheet '
                                  f'{self.get_sheet_option("name", "<unnamed>")}')
        return style

    # endregion

    # region ====== Names ======
    def normalize(self, key):
        return key

    def make_identifier(self, key):
        project = self.get_project()
        return legalize_identifier(
            self.normalize(key),
            self.location,
            self.get_sheet_option('reserved_words', ()),
            project.config.identifier_policy,
            self.get_sheet_option('forbidden_prefixes', ()),
        )

    def get_tagging_name(self):
        return self.identifier

    # endregion

    # region ====== Tagging ======
    def string_literal(self, text):
        return shared.string_literal(text, self.get_sheet_option('string_literal', 'rust'))

    def gather_tagging_info(self):
        return {
            'identifier': self.get_tagging_name(),
            'ast_name': self.ast_name,
            'location': self.location,
        }

    def get_tagging_template(self):
        return self.get_required_style('tagging_template')

    def format_template(self, template, info):
        try:
            return template % info
        except (KeyError, ValueError, TypeError) as e:
            raise StyleSheetError(f'Bad template {template!r} for {self.__class__.__name__}: {e!r}') from e

    def indent_lines(self, content, indent):
        spaces = ' ' * (indent * self.get_indent_space())
        lines = content.split('\n')
        return '\n'.join(f'{spaces}{line}' if line else line for line in lines)

    def tagging(self, indent=0):
        content = self.format_template(self.get_tagging_template(), self.gather_tagging_info())
        return self.indent_lines(content, indent)

    # endregion


# A named constant, a single string or a fixed-size array of strings
class ConstantMeta(MetaInfo):
    def __init__(self, ast_name, parent, value, location=''):
        self.representation = None
        super().__init__(ast_name, parent, value, location)

    def process(self):
        self.identifier = self.make_identifier(self.ast_name)
        self.representation = classify_and_render(self.value, self.location)

    def normalize(self, key):
        return normalize_constant(key)

    def is_array(self):
        return isinstance(self.representation, Array)

    # pub const FOO: [&str; 2] = ["a", "b"];
    def get_tagging_template(self):
        template = self.get_required_style('tagging_template')
        if isinstance(template, str):
            return template
        return template['array'] if self.is_array() else template['scalar']

    def get_array_value_template(self):
        if self.is_array() and len(self.representation) == 1:
            single = self.get_style('single_item_array_value_template')
            if single is not None:
                return single
        return self.get_style('array_value_template') or '[%(items)s]'

    def get_item_types(self):
        length = len(self.representation)
        if length == 0:
            return self.get_style('empty_item_types') or ''
        separator = self.get_style('item_separator') or ', '
        return separator.join([self.get_style('item_type') or 'str'] * length)

    def gather_tagging_info(self):
        info = super().gather_tagging_info()
        if not self.is_array():
            return info | {
                'value': self.string_literal(self.representation.text),
                'text': self.representation.text,
            }

        separator = self.get_style('item_separator') or ', '
        items = separator.join(self.string_literal(item) for item in self.representation.items)
        info = info | {
            'items': items,
            'length': len(self.representation),
            'item_types': self.get_item_types(),
        }
        info['array_value'] = self.format_template(self.get_array_value_template(), info)
        return info


# A JSON object, rendered as a nested block of constants and namespaces
class NamespaceMeta(MetaInfo):
    def __init__(self, ast_name, parent, value=None, location=''):
        self.entries:list[MetaInfo] = []
        # identifier -> location of the entry that defined it
        self.identifiers:dict[str, str] = {}

        super().__init__(ast_name, parent, value, location)

    def process(self):
        self.identifier = self.make_identifier(self.ast_name)
        self.scan_structure(self.value, self.location)

    def normalize(self, key):
        return normalize_namespace(key)

    def add_entry(self, meta:MetaInfo):
        previous = self.identifiers.get(meta.identifier)
        if previous is not None:
            raise DuplicateIdentifier(meta.identifier, meta.location, previous)

        self.identifiers[meta.identifier] = meta.location
        self.entries.append(meta)

    # Objects become nested namespaces, everything else a constant.
    # Arrays of objects are only allowed at the root and are merged into this namespace.
    def scan_structure(self, value, location):
        if isinstance(value, JsonObject):
            for key, child in value.members.items():
                child_location = join_location(location, key)

                if isinstance(child, JsonObject):
                    self.add_entry(NamespaceMeta(key, self, child, child_location))
                else:
                    self.add_entry(ConstantMeta(key, self, child, child_location))

        elif isinstance(value, JsonArray):
            for index, item in enumerate(value.items):
                item_location = f'{location}[{index}]'
                if not isinstance(item, JsonObject):
                    raise ArrayRootContainsNonObject(item_location, kind_name(item))

                self.scan_structure(item, item_location)

        else:
            raise TypeError(f'Only objects and arrays can be scanned as namespaces, got {kind_name(value)}')

    def constants(self):
        return [entry for entry in self.entries if isinstance(entry, ConstantMeta)]

    def namespaces(self):
        return [entry for entry in self.entries if isinstance(entry, NamespaceMeta)]

    def tagging(self, indent=0):
        info = self.gather_tagging_info()
        taggings = [self.indent_lines(self.format_template(self.get_required_style('open_template'), info), indent)]

        for entry in self.entries:
            taggings.append(entry.tagging(indent + 1))

        empty_body = self.get_style('empty_body')
        if not self.entries and empty_body:
            taggings.append(self.indent_lines(empty_body, indent + 1))

        close_template = self.get_style('close_template')
        if close_template:
            taggings.append(self.indent_lines(self.format_template(close_template, info), indent))

        return '\n'.join(taggings)


# Root of a generated file
class ProjectMeta(NamespaceMeta):
    def __init__(self, value, file_name, config, style_sheet):
        self.file_name = file_name
        self.config = config
        self.style_sheet = style_sheet

        super().__init__(config.root_namespace or DEFAULT_NAMESPACE, None, value, '')

    def get_project(self):
        return self

    def process(self):
        self.identifier = legalize_identifier(
            self.ast_name, 'root namespace', self.get_sheet_option('reserved_words', ()),
            self.config.identifier_policy, self.get_sheet_option('forbidden_prefixes', ()))

        if isinstance(self.value, (JsonObject, JsonArray)):
            self.scan_structure(self.value, '')
        else:
            # a bare value is named after its file: de_DE.json -> DE_DE
            self.add_entry(ConstantMeta(self.file_name, self, self.value, self.file_name))

    def tagging(self, indent=0):
        body = super().tagging(indent)

        template_content = self.get_required_style('tagging_template')
        context = {
            'indent': indent,
            'body': body,
            'namespace_name': self.identifier,
            'source_name': self.file_name,
            'lang': self.file_name,
            'generator': GENERATOR,
            'root': self,
        }
        try:
            template = Template(template_content)
            return template.render(**context)
        except GeneratorError:
            raise
        except Exception as e:
            traceback = RichTraceback()
            message = f'{traceback.error.__class__.__name__}: {traceback.error}'
            if traceback.traceback:
                _, lineno, _, line = traceback.traceback[-1]
                message += f' (template line {lineno}: {line})'
            raise StyleSheetError(message) from e

# endregion ========= Meta process =========
