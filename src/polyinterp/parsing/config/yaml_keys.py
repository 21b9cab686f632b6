"""Keys of the YAML interpolation job configuration."""

# Method and evaluation keys
METHOD_KEY = "method"
QUERY_POINT_KEY = "query_point"

# Inline node keys
NODES_KEY = "nodes"
X_KEY = "x"
Y_KEY = "y"

# Tabular file keys
FILE_KEY = "file"
FILE_PATH_KEY = "file_path"
X_COLUMN_KEY = "x_column"
Y_COLUMN_KEY = "y_column"

# Plain node file key
NODE_FILE_KEY = "node_file"

# Sampled function keys
FUNCTION_KEY = "function"
EXPRESSION_KEY = "expression"
START_KEY = "start"
END_KEY = "end"
NODE_COUNT_KEY = "nodes"
SYMBOL_KEY = "symbol"

# Validation keys
VALIDATION_KEY = "validation"
ENABLED_KEY = "enabled"
STRICT_SPACING_KEY = "strict_spacing"

# Mutually exclusive node sources
DATA_SOURCE_KEYS = (NODES_KEY, FILE_KEY, NODE_FILE_KEY, FUNCTION_KEY)

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
