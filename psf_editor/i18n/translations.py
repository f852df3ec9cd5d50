"""
Translation strings for all supported languages.

To add a new language, add its code to LANGUAGES and a dict with the same
structure as EN to TRANSLATIONS.
"""

LANGUAGES = {
    "en": "English",
    "pt_BR": "Português (Brasil)",
}

# =============================================================================
# ENGLISH (Default)
# =============================================================================
EN = {
    "window": {
        "title": "psfe",
        "glyph_title": "psfe - glyph #{index}",
    },

    "status": {
        "saved": "Saved font to {path}",
        "save_failed": "Failed to save {path}: {error}",
        "export_failed": "Failed to export {path}: {error}",
        "cleared_extended": "Cleared glyphs 128-255",
        "shrunk": "Glyph height is now {height}",
        "shrink_refused": "Glyph height is already 1, not shrinking",
    },

    "errors": {
        "file_not_found": "Error: File not found: {path}",
        "invalid_font": "Error: Could not load font {path}: {error}",
        "unreadable_font": "Error: Could not read {path}: {error}",
    },
}

# =============================================================================
# PORTUGUÊS (BRASIL)
# =============================================================================
PT_BR = {
    "window": {
        "title": "psfe",
        "glyph_title": "psfe - glifo #{index}",
    },

    "status": {
        "saved": "Fonte salva em {path}",
        "save_failed": "Falha ao salvar {path}: {error}",
        "export_failed": "Falha ao exportar {path}: {error}",
        "cleared_extended": "Glifos 128-255 apagados",
        "shrunk": "Altura dos glifos agora é {height}",
    },

    "errors": {
        "file_not_found": "Erro: Arquivo não encontrado: {path}",
        "invalid_font": "Erro: Não foi possível carregar a fonte {path}: {error}",
        "unreadable_font": "Erro: Não foi possível ler {path}: {error}",
    },
}

TRANSLATIONS = {
    "en": EN,
    "pt_BR": PT_BR,
}
