"""Import table construction from top-level import declarations."""

import pytest
from component_census.analyzer.import_table import build_import_table
from component_census.analyzer.parser import get_parser


def imports_of(code):
    tree = get_parser().parse_source(code)
    return build_import_table(tree.root_node)


class TestImportForms:
    """Every specifier form maps its local name to the module."""

    def test_default_import(self):
        assert imports_of('import Header from "my-design-system";') == {
            'Header': 'my-design-system',
        }

    def test_named_imports(self):
        assert imports_of("import { Box, Text } from '@acme/ui';") == {
            'Box': '@acme/ui',
            'Text': '@acme/ui',
        }

    def test_aliased_named_import_uses_local_name(self):
        table = imports_of('import { CoreHeader as Header } from "basis";')

        assert table == {'Header': 'basis'}
        assert 'CoreHeader' not in table

    def test_namespace_import(self):
        assert imports_of('import * as Basis from "basis";') == {'Basis': 'basis'}

    def test_default_with_named(self):
        assert imports_of("import React, { useState as useLocal } from 'react';") == {
            'React': 'react',
            'useLocal': 'react',
        }

    def test_default_with_namespace(self):
        assert imports_of("import UI, * as Parts from 'ui';") == {
            'UI': 'ui',
            'Parts': 'ui',
        }

    def test_type_only_imports(self):
        assert imports_of("import type { ButtonProps } from './Button';") == {
            'ButtonProps': './Button',
        }


class TestImportEdgeCases:
    """Declarations that bind nothing, or bind a name twice."""

    def test_side_effect_import_binds_nothing(self):
        assert imports_of("import './styles.css';") == {}

    def test_last_declaration_wins(self):
        table = imports_of(
            "import { Button } from 'old-ui';\n"
            "import { Button } from 'new-ui';\n"
        )

        assert table == {'Button': 'new-ui'}

    def test_require_is_not_an_import_declaration(self):
        assert imports_of("const Box = require('@acme/ui');") == {}

    def test_escaped_module_specifier(self):
        assert imports_of(r"import X from '\x40acme/ui';") == {'X': '@acme/ui'}

    @pytest.mark.parametrize("code", [
        "function f() { return 1; }",
        "export const Box = () => <div />;",
    ])
    def test_files_without_imports(self, code):
        assert imports_of(code) == {}
