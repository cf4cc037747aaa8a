"""Prompt and tool definitions for the header mapping call.

The instructions are in German because the headers are. The tool schema
is the only response shape the model is allowed to produce.
"""

MAP_TOOL_NAME = "mapCsvHeaders"

MAP_TOOL_DESCRIPTION = (
    "Ordnet CSV-Header den internen Feldern zu. Nicht erkannte Felder sind null. "
    'Fehlerhinweise stehen im "error"-Feld.'
)

MAP_TOOL_INPUT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "email": {
            "type": ["string", "null"],
            "description": "Header mit der E-Mail-Adresse, oder null wenn nicht erkannt",
        },
        "firstName": {
            "type": ["string", "null"],
            "description": "Header mit dem Vornamen, oder null wenn nicht erkannt",
        },
        "lastName": {
            "type": ["string", "null"],
            "description": "Header mit dem Nachnamen, oder null wenn nicht erkannt",
        },
        "error": {
            "type": "string",
            "description": (
                "Fehlertext, wenn Felder nicht zugeordnet werden konnten "
                "(optional, aber empfohlen bei null-Werten)"
            ),
        },
    },
    "required": ["email", "firstName", "lastName"],
}

MAPPING_SYSTEM_PROMPT = """\
Du ordnest Spaltenüberschriften deutschsprachiger CSV-Dateien festen \
internen Feldern zu. Antworte ausschließlich über das Werkzeug \
mapCsvHeaders und erfinde keine Header, die nicht in der Liste stehen.
"""

MAPPING_USER_INSTRUCTIONS = """\
Hier sind die Spaltenüberschriften einer CSV-Datei: {headers_json}.

Bitte ordne sie den internen Feldern "email", "firstName" und "lastName" zu.

- Gib für jedes Feld den Original-Header zurück (z.B. "E-Mail-Adresse").
- Falls du ein Feld nicht zuordnen kannst, gib für dieses Feld den Wert null zurück.
- Wenn mindestens eines dieser Felder null ist, MUSST du zusätzlich ein Feld \
"error" zurückgeben, das beschreibt, welche Felder nicht zugeordnet wurden und warum.
- Hinweis: Das Wort "Name" bedeutet im Deutschen in der Regel "Nachname" und \
sollte daher dem internen Feld "lastName" zugeordnet werden, nicht "firstName".
"""
