"""Report wording per language."""

DEFAULT_LANGUAGE = "pt"

LABELS = {
    "pt": {
        "file_list_header": "Arquivos alterados:",
        "directory_header": "Resumo por diretório:",
        "type_header": "Tipos de alteração:",
        "root": "raiz",
        "directory_unit": "arquivo(s)",
        "type_unit": "file(s)",
        "no_changes": "sem arquivos alterados",
        "changes_in": "alterações em",
        "additions": "adições",
        "deletions": "remoções",
        "language_name": "Brazilian Portuguese",
        "statuses": {
            "M": "modificado",
            "A": "adicionado",
            "D": "deletado",
            "R": "renomeado",
            "??": "não rastreado",
        },
    },
    "en": {
        "file_list_header": "Changed files:",
        "directory_header": "Summary by directory:",
        "type_header": "Change types:",
        "root": "root",
        "directory_unit": "file(s)",
        "type_unit": "file(s)",
        "no_changes": "no changed files",
        "changes_in": "changes in",
        "additions": "additions",
        "deletions": "deletions",
        "language_name": "English",
        "statuses": {
            "M": "modified",
            "A": "added",
            "D": "deleted",
            "R": "renamed",
            "??": "untracked",
        },
    },
}

LANGUAGES = list(LABELS.keys())


def get_labels(language: str | None) -> dict:
    return LABELS.get(language or DEFAULT_LANGUAGE, LABELS[DEFAULT_LANGUAGE])


def describe_status(status: str, language: str | None = None) -> str:
    """Status code as words; codes without a mapping come back unchanged."""
    return get_labels(language)["statuses"].get(status, status)
