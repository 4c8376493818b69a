"""Tests for the DefinitionTransformer."""

import pytest

from swagger2ts.codegen.definitions import (
    DefinitionTransformer,
    enum_member_name,
    enum_type_name,
)
from swagger2ts.codegen.schema_resolver import ReferenceResolver
from swagger2ts.description import ApiDescription
from swagger2ts.exceptions import DuplicateNameError, SchemaReferenceError

from .fixtures import GENERIC_NAMES_SPEC, MINIMAL_SWAGGER_SPEC, PETSTORE_SPEC, spec_with


def _transform(spec: dict):
    description = ApiDescription.model_validate(spec)
    return DefinitionTransformer(description, ReferenceResolver(description)).transform()


def _by_name(items, name):
    return next(item for item in items if item.name == name)


class TestDefinitionTransformer:
    """Tests for model and enum construction."""

    def test_models_follow_definition_order(self):
        models, _ = _transform(PETSTORE_SPEC)

        assert [model.name for model in models] == ['Pet', 'Category', 'Tag', 'Order']
        assert [model.last for model in models] == [False, False, False, True]

    def test_no_definitions(self):
        models, enums = _transform(MINIMAL_SWAGGER_SPEC)

        assert models == []
        assert enums == []

    def test_array_of_references(self):
        """An array whose items are a $ref is a reference, not a plain property."""
        models, _ = _transform(PETSTORE_SPEC)
        pet = _by_name(models, 'Pet')

        tags = _by_name(pet.refs, 'tags')
        assert tags.is_ref
        assert tags.is_array
        assert tags.type == 'Tag'
        assert tags.item_type == 'Tag'
        assert tags.kind == 'reference'
        assert 'tags' not in [prop.name for prop in pet.properties]
        assert 'Tag' in [prop.type for prop in pet.ref_imports]

    def test_direct_reference(self):
        models, _ = _transform(PETSTORE_SPEC)
        pet = _by_name(models, 'Pet')

        category = _by_name(pet.refs, 'category')
        assert category.type == 'Category'
        assert category.target_type == 'Category'
        assert not category.is_array
        assert category.item_type is None

    def test_plain_properties(self):
        models, _ = _transform(PETSTORE_SPEC)
        pet = _by_name(models, 'Pet')

        assert [prop.name for prop in pet.properties] == ['id', 'name', 'photoUrls']
        assert pet.properties[-1].last

        prop_id = _by_name(pet.properties, 'id')
        assert prop_id.target_type == 'number'
        assert prop_id.required

        photo_urls = _by_name(pet.properties, 'photoUrls')
        assert photo_urls.is_array
        assert photo_urls.target_type == 'Array'
        assert photo_urls.item_type == 'string'
        assert not photo_urls.required

    def test_enum_property_synthesizes_enum(self):
        """An inline enum becomes <Model><Property> with one member per literal."""
        models, enums = _transform(PETSTORE_SPEC)
        order = _by_name(models, 'Order')

        status = _by_name(order.enums, 'status')
        assert status.is_enum
        assert status.type == 'OrderStatus'
        assert 'status' not in [prop.name for prop in order.properties]

        order_status = _by_name(enums, 'OrderStatus')
        assert [member.value for member in order_status.members] == ['placed', 'approved']
        assert [member.name for member in order_status.members] == ['Placed', 'Approved']
        assert [member.last for member in order_status.members] == [False, True]

    def test_enums_follow_model_order(self):
        _, enums = _transform(PETSTORE_SPEC)

        assert [enum.name for enum in enums] == ['PetStatus', 'OrderStatus']
        assert enums[-1].last

    def test_has_imports(self):
        models, _ = _transform(PETSTORE_SPEC)

        assert _by_name(models, 'Pet').has_imports
        assert _by_name(models, 'Order').has_imports
        assert not _by_name(models, 'Tag').has_imports

    def test_ref_imports_are_unique(self):
        spec = spec_with(
            PETSTORE_SPEC,
            definitions={
                'Tag': {'type': 'object'},
                'Pet': {
                    'properties': {
                        'primary': {'$ref': '#/definitions/Tag'},
                        'others': {'type': 'array', 'items': {'$ref': '#/definitions/Tag'}},
                    }
                },
            },
        )
        models, _ = _transform(spec)
        pet = _by_name(models, 'Pet')

        assert len(pet.refs) == 2
        assert [prop.type for prop in pet.ref_imports] == ['Tag']
        assert pet.ref_imports[0].last

    def test_generic_and_delimited_names(self):
        models, _ = _transform(GENERIC_NAMES_SPEC)

        assert [model.name for model in models] == ['PagePet', 'PetSummary']
        items = models[0].refs[0]
        assert items.item_type == 'PetSummary'

    def test_unresolved_reference_raises(self):
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={'Pet': {'properties': {'owner': {'$ref': '#/definitions/Owner'}}}},
        )

        with pytest.raises(SchemaReferenceError):
            _transform(spec)

    def test_colliding_enum_names_raise(self):
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={
                'Pet': {
                    'properties': {
                        'pet-status': {'type': 'string', 'enum': ['a']},
                        'pet_status': {'type': 'string', 'enum': ['b']},
                    }
                },
            },
        )

        with pytest.raises(DuplicateNameError) as exc_info:
            _transform(spec)

        assert exc_info.value.namespace == 'enum'

    def test_untyped_array_items(self):
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={'Bag': {'properties': {'things': {'type': 'array'}}}},
        )
        models, _ = _transform(spec)

        things = models[0].properties[0]
        assert things.item_type == 'any'
        assert things.kind == 'array'


class TestNamingHelpers:
    def test_enum_type_name(self):
        assert enum_type_name('Order', 'status') == 'OrderStatus'
        assert enum_type_name('Order', 'delivery-state') == 'OrderDeliveryState'

    def test_enum_member_name(self):
        assert enum_member_name('available') == 'Available'
        assert enum_member_name('in-stock') == 'InStock'
        assert enum_member_name(3) == '3'


class TestSelfAndCrossReferences:
    def test_self_reference_is_not_imported(self):
        """A tree-shaped definition refers to itself without importing itself."""
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={
                'Category': {
                    'properties': {
                        'name': {'type': 'string'},
                        'parent': {'$ref': '#/definitions/Category'},
                        'children': {
                            'type': 'array',
                            'items': {'$ref': '#/definitions/Category'},
                        },
                    }
                },
            },
        )
        models, _ = _transform(spec)
        category = models[0]

        assert [prop.name for prop in category.refs] == ['parent', 'children']
        assert category.ref_imports == []
        assert not category.has_imports

    def test_self_reference_keeps_other_imports(self):
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={
                'Tag': {'type': 'object'},
                'Node': {
                    'properties': {
                        'parent': {'$ref': '#/definitions/Node'},
                        'tag': {'$ref': '#/definitions/Tag'},
                    }
                },
            },
        )
        models, _ = _transform(spec)
        node = _by_name(models, 'Node')

        assert [prop.type for prop in node.ref_imports] == ['Tag']
        assert node.ref_imports[0].last
        assert node.has_imports

    def test_enum_named_like_a_definition_raises(self):
        """A synthesized enum may not take the name of a definition."""
        spec = spec_with(
            MINIMAL_SWAGGER_SPEC,
            definitions={
                'Order': {
                    'properties': {'status': {'type': 'string', 'enum': ['placed']}}
                },
                'OrderStatus': {'type': 'object'},
            },
        )

        with pytest.raises(DuplicateNameError) as exc_info:
            _transform(spec)

        error = exc_info.value
        assert error.name == 'OrderStatus'
        assert error.first == 'OrderStatus'
        assert error.second.startswith('Order.')
