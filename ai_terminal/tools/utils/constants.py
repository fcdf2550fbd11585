# Константы для командных инструментов

# head / tail
DEFAULT_LINE_COUNT = 10

# rm
RECURSIVE_FLAGS = {"-r", "-R", "-rf", "-fr", "-Rf", "--recursive"}

# echo
REDIRECT_OPERATOR = ">"
QUOTE_CHARS = "'\""

# Заглушки, пока оракул отвечает
EXECUTE_PLACEHOLDER = "Executing with AI..."
ASK_PLACEHOLDER = "Thinking..."
MANUAL_PLACEHOLDER = "Formatting manual page..."
