GENERATOR_NAME = 'json_const_generator'


# region ====== Base error ======
class GeneratorError(Exception):
    # stage is inserted into the diagnostic prefix, i.e. [json_const_generator:parse:ERROR]
    stage = ''

    def __init__(self, message, file_name=None):
        super().__init__(message)
        self.message = message
        self.file_name = file_name

    def get_prefix(self):
        stage = f':{self.stage}' if self.stage else ''
        return f'[{GENERATOR_NAME}{stage}:ERROR]'

    def __str__(self):
        if self.file_name:
            return f'{self.get_prefix()} {self.file_name}: {self.message}'
        return f'{self.get_prefix()} {self.message}'

# endregion


# region ====== File selection ======
class DirectoryNotFound(GeneratorError):
    def __init__(self, directory, cause=None):
        self.directory = directory
        message = f'Failed to read directory {directory}'
        if cause is not None:
            message += f' cause {cause}'
        super().__init__(message)


class FileNotFoundForLanguage(GeneratorError):
    def __init__(self, directory, lang):
        self.directory = directory
        self.lang = lang
        super().__init__(f'Failed to get file with name {lang} in directory {directory}')

# endregion


# region ====== File parsing ======
class ParseError(GeneratorError):
    stage = 'parse'


class MissingExtension(ParseError):
    def __init__(self, file_name):
        super().__init__('A file with some extension was expected', file_name)


class UnsupportedExtension(ParseError):
    def __init__(self, file_name, extension):
        self.extension = extension
        super().__init__(f'Unsupported file extension "{extension}"', file_name)


class UnreadableFile(ParseError):
    def __init__(self, file_name, cause):
        self.cause = cause
        super().__init__(f'Cannot read file cause {cause}', file_name)


class MalformedJson(ParseError):
    def __init__(self, cause, file_name=None):
        self.cause = cause
        super().__init__(f'Cannot deserialize cause {cause}', file_name)

# endregion


# region ====== Structure ======
class ArrayContainsObject(ParseError):
    def __init__(self, location, file_name=None):
        self.location = location
        super().__init__(f'Array element {location} is an Object, everything except Object was expected', file_name)


class ArrayRootContainsNonObject(ParseError):
    def __init__(self, location, kind, file_name=None):
        self.location = location
        self.kind = kind
        super().__init__(f'Expected Object in root Array at {location}, but actually {kind}', file_name)


class InvalidIdentifier(ParseError):
    def __init__(self, identifier, location, reason, file_name=None):
        self.identifier = identifier
        self.location = location
        super().__init__(f'"{identifier}" (from {location}) is not a valid identifier: {reason}', file_name)


class DuplicateIdentifier(ParseError):
    def __init__(self, identifier, location, previous_location, file_name=None):
        self.identifier = identifier
        self.location = location
        self.previous_location = previous_location
        super().__init__(
            f'Identifier {identifier} from {location} is already defined by {previous_location}', file_name)

# endregion


# region ====== Style sheets ======
class StyleSheetNotFound(GeneratorError):
    def __init__(self, name):
        self.name = name
        super().__init__(f'Style sheet {name} not found')


class StyleSheetError(GeneratorError):
    stage = 'style'

# endregion
