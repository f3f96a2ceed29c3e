# frontend/intake.py
from frontend.state import DEFAULT_LANGUAGE, FileLoaded

EXTENSION_LANGUAGES = {
    "js": "javascript",
    "jsx": "javascript",
    "py": "python",
    "java": "java",
    "cpp": "c++",
    "c": "c",
    "cs": "c#",
    "rb": "ruby",
    "go": "go",
    "php": "php",
    "ts": "typescript",
    "tsx": "typescript",
}

# Extensions the file picker accepts (Streamlit wants them without the dot)
ALLOWED_EXTENSIONS = ["js", "jsx", "ts", "tsx", "py", "java", "cpp", "c", "cs", "rb", "go", "php"]

# Selector label -> language tag
LANGUAGE_CHOICES = {
    "javascript": "JavaScript",
    "python": "Python",
    "java": "Java",
    "c++": "C++",
    "c": "C",
    "c#": "C#",
    "typescript": "TypeScript",
    "ruby": "Ruby",
    "go": "Go",
    "php": "PHP",
}


def detect_language(file_name: str) -> str:
    """Language tag for ``file_name`` by extension; unknown -> DEFAULT_LANGUAGE."""
    if "." not in file_name:
        return DEFAULT_LANGUAGE
    ext = file_name.rsplit(".", 1)[1].lower()
    return EXTENSION_LANGUAGES.get(ext, DEFAULT_LANGUAGE)


def decode_upload(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def load_upload(file_name: str, data: bytes) -> FileLoaded:
    """Turn a picked file into the form update it causes."""
    return FileLoaded(
        file_name=file_name,
        source_text=decode_upload(data),
        language=detect_language(file_name),
    )
