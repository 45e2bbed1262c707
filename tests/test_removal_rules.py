"""
Literal input/output checks for scrubbing a removed component from source text.
"""

from atomic_shadcn.models.domain_models import RemovalTarget
from atomic_shadcn.rewriters.removal_rules import (
    ImportClause,
    collect_exported_symbols,
    remove_component_imports,
    remove_component_references,
    removal_target_for,
    strip_jsx_usages,
)
from atomic_shadcn.utils.transcript import capture_transcript

from conftest import CARD_TSX

CARD = RemovalTarget("card", ("Card", "CardHeader", "CardTitle"))


class TestImportRemoval:

    def test_direct_module_import_is_deleted(self):
        text = 'import { Card, CardHeader } from "@/components/organisms/card";\nconst x = 1;\n'
        result, names = remove_component_imports(text, CARD)

        assert result == "const x = 1;\n"
        assert names == {"Card", "CardHeader"}

    def test_every_path_shape_and_folder_is_matched(self):
        text = (
            'import { Card } from "@/components/ui/card";\n'
            "import { CardTitle } from '../components/organisms/card';\n"
            'import { CardHeader } from "./atoms/card";\n'
            'import { Button } from "@/components/atoms/button";\n'
        )
        result, _ = remove_component_imports(text, CARD)
        assert result == 'import { Button } from "@/components/atoms/button";\n'

    def test_default_and_namespace_imports_are_deleted(self):
        text = (
            'import Card from "@/components/organisms/card";\n'
            'import * as CardParts from "@/components/organisms/card";\n'
            'import type { CardTitle } from "@/components/organisms/card";\n'
            'import "@/components/organisms/card";\n'
            "import React from 'react';\n"
        )
        result, names = remove_component_imports(text, CARD)

        assert result == "import React from 'react';\n"
        assert {"Card", "CardParts", "CardTitle"} <= names

    def test_unrelated_name_survives_in_module_import(self):
        text = 'import { Card, Button } from "@/components/organisms/card";\n'
        result, names = remove_component_imports(text, CARD)

        assert result == 'import { Button } from "@/components/organisms/card";\n'
        assert names == {"Card"}

    def test_barrel_named_list_is_shrunk(self):
        text = 'import { Button, Card as Panel } from "@/components";\n'
        result, names = remove_component_imports(text, CARD)

        assert result == 'import { Button } from "@/components";\n'
        assert names == {"Panel"}

    def test_barrel_import_dropped_when_list_empties(self):
        text = "import { Card, CardTitle } from '@/components/organisms'\nexport {}\n"
        result, _ = remove_component_imports(text, CARD)
        assert result == "export {}\n"

    def test_multiline_list_keeps_its_layout(self):
        text = (
            "import {\n"
            "  Button,\n"
            "  Card,\n"
            "  Input,\n"
            '} from "@/components";\n'
        )
        result, _ = remove_component_imports(text, CARD)
        assert result == 'import {\n  Button,\n  Input,\n} from "@/components";\n'

    def test_components_with_similar_ids_are_untouched(self):
        text = (
            'import { AlertDialog } from "@/components/molecules/alert-dialog";\n'
            'import { Dialog } from "@/components/molecules/dialog";\n'
        )
        target = RemovalTarget("dialog", ("Dialog",))
        result, _ = remove_component_imports(text, target)
        assert result == 'import { AlertDialog } from "@/components/molecules/alert-dialog";\n'

    def test_barrel_without_removed_symbols_is_untouched(self):
        text = 'import { Button } from "@/components/atoms";\n'
        assert remove_component_imports(text, CARD)[0] == text

    def test_commented_barrel_list_is_shrunk(self):
        text = (
            "import {\n"
            "  Button, // primary\n"
            "  Card,\n"
            "} from \"@/components\";\n"
            "\n"
            "<Card>x</Card>\n"
        )
        target = RemovalTarget("card", ("Card",))

        assert remove_component_references(text, target) == 'import {\n  Button,\n} from "@/components";\n\n'

    def test_unparsable_barrel_clause_is_logged_and_kept(self):
        text = 'import { Card, 123 } from "@/components";\n'
        with capture_transcript() as transcript:
            result, _ = remove_component_imports(text, CARD, source="src/app/page.tsx")

        assert result == text
        assert any("@/components in src/app/page.tsx" in line for line in transcript)


class TestJsxStripping:

    def test_paired_and_self_closing_tags(self):
        text = (
            "  return (\n"
            "    <main>\n"
            '      <Card className="p-4" onClick={() => go(">")}>\n'
            "        <CardHeader>Title</CardHeader>\n"
            "      </Card>\n"
            "      <Card />\n"
            "      <CardFooterLike />\n"
            "    </main>\n"
            "  );\n"
        )
        result = strip_jsx_usages(text, ["Card", "CardHeader"])
        assert result == (
            "  return (\n"
            "    <main>\n"
            "      <CardFooterLike />\n"
            "    </main>\n"
            "  );\n"
        )

    def test_attributes_with_nested_object_literals(self):
        text = "<main>\n  <Card style={{a: {b: 1}}} />\n</main>\n"
        assert strip_jsx_usages(text, ["Card"]) == "<main>\n</main>\n"

    def test_nested_same_tag(self):
        text = "<div><Card><Card>inner</Card></Card></div>"
        assert strip_jsx_usages(text, ["Card"]) == "<div></div>"

    def test_namespace_member_tags(self):
        text = "<section>\n  <Parts.Header title='x' />\n</section>\n"
        assert strip_jsx_usages(text, ["Parts"]) == "<section>\n</section>\n"

    def test_file_without_import_is_left_alone(self):
        text = 'import { Button } from "@/components/atoms/button";\n<Card />\n'
        assert remove_component_references(text, CARD) == text


class TestSymbolCollection:

    def test_collects_declared_and_listed_exports(self):
        content = CARD_TSX + "export function CardFooter() {}\nexport default Card\n"
        symbols = collect_exported_symbols(content)
        assert set(symbols) == {"Card", "CardHeader", "CardTitle", "CardFooter"}

    def test_target_prefers_registry_then_module_then_pascal_case(self):
        dialog = removal_target_for("dialog", None, ("Dialog", "DialogTrigger"))
        assert dialog.symbols == ("Dialog", "DialogTrigger")

        card = removal_target_for("card", CARD_TSX, None)
        assert card.symbols == ("Card", "CardHeader", "CardTitle")

        menu = removal_target_for("dropdown-menu", None, None)
        assert menu.symbols == ("DropdownMenu",)


class TestImportClause:

    def test_parses_mixed_clause(self):
        clause = ImportClause("React, { useState as useLocal, type FC }")
        assert clause.default == "React"
        assert clause.specifiers == [("useState", "useLocal", False), ("FC", "FC", True)]
        assert clause.complete

    def test_render_keeps_type_only_prefix(self):
        clause = ImportClause("type { A, B }")
        assert clause.render([("A", "A", False)]) == "type { A }"
