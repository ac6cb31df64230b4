"""Example usage of the apidiff engine."""

import json
from apidiff import ApiDiffEngine, EngineConfig

# Base version of a small pet store contract
base = {
    "openapi": "3.0.3",
    "info": {"title": "Pets", "version": "1.0.0"},
    "paths": {
        "/cats": {
            "get": {
                "tags": ["Cats", "Dogs"],
                "summary": "List cats",
                "operationId": "cats-list",
                "parameters": [{"$ref": "#/components/parameters/Limit"}],
            },
            "post": {
                "operationId": "cats-create",
                "requestBody": {
                    "required": True,
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Cat"}
                        }
                    }
                }
            }
        },
        "/dogs": {
            "get": {"operationId": "dogs/list"}
        },
        "/internal/health": {
            "get": {"operationId": "health"}
        }
    },
    "components": {
        "parameters": {
            "Limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}
        },
        "schemas": {
            "Cat": {"type": "object", "properties": {"name": {"type": "string"}}}
        }
    }
}

# Head version: tags, ids, a parameter and the Cat schema changed,
# /dogs was dropped and /fish was added
head = {
    "openapi": "3.0.3",
    "info": {"title": "Pets", "version": "2.0.0"},
    "paths": {
        "/cats": {
            "get": {
                "tags": ["Cats", "Fish"],
                "summary": "List cats",
                "operationId": "cats/list",
                "parameters": [{"$ref": "#/components/parameters/Limit"}],
            },
            "post": {
                "operationId": "cats/create",
                "requestBody": {
                    "required": True,
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/Cat"}
                        }
                    }
                }
            }
        },
        "/fish": {
            "get": {"operationId": "fish/list"}
        }
    },
    "components": {
        "parameters": {
            "Limit": {"name": "limit", "in": "query", "required": True,
                      "schema": {"type": "integer", "maximum": 100}}
        },
        "schemas": {
            "Cat": {
                "type": "object",
                "required": ["name"],
                "properties": {"name": {"type": "string"}}
            }
        }
    }
}

# Create engine that leaves internal endpoints out of the report
config = EngineConfig(
    ignore_paths=["$.paths['/internal/health']"],
    include_items=False,
)
engine = ApiDiffEngine(config)

result = engine.compare(base, head)

print("Diff Report:")
print(json.dumps(result.to_dict(), indent=2))
