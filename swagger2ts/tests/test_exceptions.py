"""Test suite for the swagger2ts exception hierarchy."""

import pytest

from swagger2ts.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    DuplicateNameError,
    OutputError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    SchemaValidationError,
    Swagger2TSError,
    TemplateRenderError,
    UnsupportedFeatureError,
)


class TestSwagger2TSError:
    def test_basic_message(self):
        error = Swagger2TSError('Something went wrong')

        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    @pytest.mark.parametrize(
        'error',
        [
            SchemaLoadError('swagger.json'),
            SchemaValidationError('swagger.json'),
            SchemaReferenceError('#/definitions/Pet'),
            CodeGenerationError('failed'),
            DuplicateNameError('Pet', 'model'),
            TemplateRenderError('client'),
            ConfigurationError('bad'),
            OutputError('out'),
            UnsupportedFeatureError('formData parameters'),
        ],
    )
    def test_inheritance(self, error):
        """Every error can be caught as Swagger2TSError."""
        assert isinstance(error, Swagger2TSError)


class TestSchemaErrors:
    def test_load_error_with_cause(self):
        cause = FileNotFoundError('missing')
        error = SchemaLoadError('swagger.json', cause=cause)

        assert isinstance(error, SchemaError)
        assert error.cause is cause
        assert "'swagger.json'" in error.message
        assert 'missing' in error.message

    def test_validation_error_lists_errors(self):
        error = SchemaValidationError('swagger.json', errors=['paths: Field required'])

        assert error.errors == ['paths: Field required']
        assert 'paths: Field required' in error.message

    def test_reference_error(self):
        error = SchemaReferenceError('#/definitions/Owner', 'not found')

        assert error.reference == '#/definitions/Owner'
        assert error.message.endswith(': not found')


class TestCodeGenerationErrors:
    def test_context_and_cause(self):
        error = CodeGenerationError('failed', context='models/Pet.ts', cause=ValueError('x'))

        assert error.message == 'failed (while generating models/Pet.ts): x'

    def test_duplicate_name(self):
        error = DuplicateNameError('PetStore', 'model', first='pet-store', second='pet_store')

        assert isinstance(error, CodeGenerationError)
        assert error.message == (
            "Duplicate model name 'PetStore' ('pet_store' collides with 'pet-store')"
        )

    def test_template_render_error(self):
        error = TemplateRenderError('model', artifact='models/Pet.ts')

        assert isinstance(error, CodeGenerationError)
        assert error.artifact == 'models/Pet.ts'
        assert 'models/Pet.ts' in error.message


class TestOtherErrors:
    def test_configuration_error(self):
        error = ConfigurationError('Field required', config_path='cfg.yaml', field='documents')

        assert error.message == "Field required in 'cfg.yaml' (field: documents)"

    def test_unsupported_feature(self):
        error = UnsupportedFeatureError('formData parameters', 'Skipped')

        assert error.message == 'Unsupported feature: formData parameters. Skipped'
