class FiledRecipesError(Exception):
    pass


class ConfigError(FiledRecipesError):
    pass


class InvalidLocationError(FiledRecipesError):
    pass


class FormatViolationError(FiledRecipesError):
    pass


class ResourceFailureError(FiledRecipesError):
    pass


class RecipeIndexError(FiledRecipesError, IndexError):
    pass
