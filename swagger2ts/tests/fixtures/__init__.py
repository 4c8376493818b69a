"""Test fixtures for swagger2ts tests.

This module provides sample Swagger 2.0 documents and utilities for testing
the code generation functionality.
"""

import copy

# Minimal Swagger 2.0 document for basic testing
MINIMAL_SWAGGER_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Pet store with models, enums, references and every parameter location
PETSTORE_SPEC = {
    'swagger': '2.0',
    'info': {
        'title': 'Petstore API',
        'version': '1.0.0',
        'description': 'A sample pet store',
    },
    'host': 'petstore.example.com',
    'basePath': '/v1',
    'schemes': ['https', 'http'],
    'produces': ['application/json'],
    'securityDefinitions': {
        'api_key': {'type': 'apiKey', 'name': 'api_key', 'in': 'header'}
    },
    'paths': {
        '/pets': {
            'get': {
                'operationId': 'listPets',
                'description': 'List all pets.\nResults are paged.',
                'parameters': [
                    {
                        'name': 'limit',
                        'in': 'query',
                        'type': 'integer',
                        'required': False,
                        'description': 'Maximum number of results',
                    },
                    {
                        'name': 'X-Request-Id',
                        'in': 'header',
                        'type': 'string',
                    },
                ],
                'responses': {'200': {'description': 'A list of pets'}},
            },
            'post': {
                'operationId': 'createPet',
                'parameters': [
                    {
                        'name': 'body',
                        'in': 'body',
                        'required': True,
                        'schema': {'$ref': '#/definitions/Pet'},
                    }
                ],
                'responses': {'201': {'description': 'Created'}},
            },
        },
        '/pets/{petId}': {
            'parameters': [
                {'name': 'petId', 'in': 'path', 'required': True, 'type': 'string'}
            ],
            'get': {
                'summary': 'Find a pet by ID',
                'responses': {'200': {'description': 'A pet'}},
            },
            'delete': {
                'operationId': 'delete-pet',
                'responses': {'204': {'description': 'Deleted'}},
            },
        },
        '/pets/{petId}/photo': {
            'post': {
                'operationId': 'uploadPhoto',
                'consumes': ['multipart/form-data'],
                'parameters': [
                    {'name': 'petId', 'in': 'path', 'required': True, 'type': 'string'},
                    {'name': 'file', 'in': 'formData', 'type': 'file'},
                ],
                'responses': {'200': {'description': 'Uploaded'}},
            }
        },
        '/store/order': {
            'post': {
                'operationId': 'placeOrder',
                'responses': {'200': {'description': 'Order placed'}},
            }
        },
    },
    'definitions': {
        'Pet': {
            'type': 'object',
            'required': ['id', 'name'],
            'properties': {
                'id': {'type': 'integer', 'format': 'int64'},
                'name': {'type': 'string', 'description': 'The pet name'},
                'tags': {'type': 'array', 'items': {'$ref': '#/definitions/Tag'}},
                'category': {'$ref': '#/definitions/Category'},
                'status': {
                    'type': 'string',
                    'enum': ['available', 'pending', 'sold'],
                },
                'photoUrls': {'type': 'array', 'items': {'type': 'string'}},
            },
        },
        'Category': {
            'type': 'object',
            'properties': {
                'id': {'type': 'integer'},
                'name': {'type': 'string'},
            },
        },
        'Tag': {
            'type': 'object',
            'properties': {
                'id': {'type': 'integer'},
                'name': {'type': 'string'},
            },
        },
        'Order': {
            'type': 'object',
            'properties': {
                'id': {'type': 'integer'},
                'petId': {'type': 'integer'},
                'status': {'type': 'string', 'enum': ['placed', 'approved']},
                'complete': {'type': 'boolean'},
            },
        },
    },
}

# Parameters of every flavour the classifier distinguishes
PARAMETERS_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Parameters API', 'version': '1.0.0'},
    'host': 'api.example.com',
    'security': [{'api_key': []}],
    'parameters': {
        'pageSize': {
            'name': 'page-size',
            'in': 'query',
            'type': 'integer',
        }
    },
    'paths': {
        '/search': {
            'get': {
                'operationId': 'search',
                'produces': ['application/xml'],
                'parameters': [
                    {'$ref': '#/parameters/pageSize'},
                    {
                        'name': 'filter',
                        'in': 'query',
                        'type': 'string',
                        'x-name-pattern': 'filter.*',
                    },
                    {
                        'name': 'format',
                        'in': 'query',
                        'type': 'string',
                        'enum': ['json'],
                    },
                    {
                        'name': 'X-Forwarded-For',
                        'in': 'header',
                        'type': 'string',
                        'x-proxy-header': True,
                    },
                    {'name': 'flag', 'in': 'cookie', 'type': 'boolean'},
                ],
            },
            'put': {
                'x-swagger-js-method-name': 'replaceSearch',
                'parameters': [
                    {
                        'name': 'query',
                        'in': 'body',
                        'schema': {'type': 'object'},
                    }
                ],
            },
        },
    },
}

# Generic definition names decorated with guillemets
GENERIC_NAMES_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Generic API', 'version': '1.0.0'},
    'paths': {},
    'definitions': {
        'Page«Pet»': {
            'type': 'object',
            'properties': {
                'items': {
                    'type': 'array',
                    'items': {'$ref': '#/definitions/pet-summary'},
                }
            },
        },
        'pet-summary': {
            'type': 'object',
            'properties': {'name': {'type': 'string'}},
        },
    },
}


def spec_with(base: dict, **overrides) -> dict:
    """Return a deep copy of ``base`` with top-level keys replaced."""
    spec = copy.deepcopy(base)
    spec.update(overrides)
    return spec
