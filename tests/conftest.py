"""Configuración de pytest para tests de dynaform."""

import json

import pytest

from dynaform.schema import load_schema


@pytest.fixture
def raw_schema():
    """Formulario de ejemplo con tres secciones y todos los tipos de campo."""
    return {
        "formTitle": "Student Registration",
        "sections": [
            {
                "title": "Personal",
                "description": "About you",
                "fields": [
                    {
                        "fieldId": "name",
                        "type": "text",
                        "label": "Full name",
                        "required": True,
                        "minLength": 5,
                        "maxLength": 20,
                        "placeholder": "First and last name",
                        "dataTestId": "name-input",
                    },
                    {"fieldId": "email", "type": "email", "label": "Email", "required": True},
                    {"fieldId": "phone", "type": "tel", "label": "Phone"},
                ],
            },
            {
                "title": "Preferences",
                "description": "Tell us more",
                "fields": [
                    {
                        "fieldId": "gender",
                        "type": "radio",
                        "label": "Gender",
                        "required": True,
                        "options": [
                            {"value": "m", "label": "Male"},
                            {"value": "f", "label": "Female"},
                        ],
                    },
                    {
                        "fieldId": "country",
                        "type": "dropdown",
                        "label": "Country",
                        "options": [
                            {"value": "uy", "label": "Uruguay"},
                            {"value": "in", "label": "India"},
                        ],
                    },
                    {
                        "fieldId": "skills",
                        "type": "checkbox",
                        "label": "Skills",
                        "required": True,
                        "options": [
                            {"value": "a", "label": "Python"},
                            {"value": "b", "label": "SQL"},
                            {"value": "c", "label": "Go"},
                        ],
                    },
                ],
            },
            {
                "title": "Extra",
                "fields": [
                    {"fieldId": "bio", "type": "textarea", "label": "Bio", "maxLength": 10},
                    {"fieldId": "dob", "type": "date", "label": "Birth date", "required": True},
                ],
            },
        ],
    }


@pytest.fixture
def schema(raw_schema):
    """FormSchema cargado desde raw_schema."""
    return load_schema(raw_schema)


@pytest.fixture
def schema_file(tmp_path, raw_schema):
    """Archivo JSON con raw_schema."""
    path = tmp_path / "form.json"
    path.write_text(json.dumps(raw_schema), encoding="utf-8")
    return path


@pytest.fixture
def make_schema():
    """Fábrica de esquemas: cada argumento es la lista de campos de una sección."""
    def factory(*sections_fields, title="Test form"):
        return load_schema({
            "title": title,
            "sections": [
                {"title": f"S{i}", "description": "", "fields": fields}
                for i, fields in enumerate(sections_fields)
            ],
        })
    return factory
