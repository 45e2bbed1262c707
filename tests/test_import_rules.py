"""
Literal input/output checks for the forward and reverse import rules.
"""

import pytest

from atomic_shadcn.rewriters.import_rules import apply_rules, build_forward_rules, build_reverse_rules


def forward(text, component_ids=None, alias="@"):
    return apply_rules(text, build_forward_rules(alias, component_ids))[0]


def reverse(text, component_ids=None, alias="@"):
    return apply_rules(text, build_reverse_rules(alias, component_ids))[0]


class TestForwardRules:

    @pytest.mark.parametrize("before, after", [
        ('import { Button } from "@/components/ui/button";',
         'import { Button } from "@/components/atoms/button";'),
        ("import { Dialog } from '../../components/ui/dialog';",
         "import { Dialog } from '@/components/molecules/dialog';"),
        ('import { Card } from "../ui/card";',
         'import { Card } from "@/components/organisms/card";'),
        ('import { Card } from "./ui/card";',
         'import { Card } from "@/components/organisms/card";'),
        ('export { Badge } from "@/components/ui/badge";',
         'export { Badge } from "@/components/atoms/badge";'),
        ('const Chart = lazy(() => import("@/components/ui/chart"));',
         'const Chart = lazy(() => import("@/components/organisms/chart"));'),
        ('import "@/components/ui/sonner";',
         'import "@/components/molecules/sonner";'),
    ])
    def test_every_shape_is_normalized_to_alias_form(self, before, after):
        assert forward(before) == after

    def test_unknown_component_goes_to_default_category(self):
        assert forward('from "@/components/ui/fancy-widget"') == 'from "@/components/molecules/fancy-widget"'

    def test_scope_limits_rewritten_ids(self):
        text = 'import { Button } from "@/components/ui/button";\nimport { Card } from "@/components/ui/card";\n'
        result = forward(text, component_ids=["button"])

        assert '"@/components/atoms/button"' in result
        assert '"@/components/ui/card"' in result

    def test_second_pass_changes_nothing(self):
        text = (
            'import { Button } from "@/components/ui/button";\n'
            "import { Tabs } from '../components/ui/tabs';\n"
        )
        once = forward(text)
        assert forward(once) == once

    def test_unrelated_paths_are_untouched(self):
        text = (
            'import { cn } from "@/lib/utils";\n'
            'import { Thing } from "@/components/uix/button";\n'
            'import { Nested } from "@/components/ui/button/extra";\n'
        )
        assert forward(text) == text

    def test_custom_alias(self):
        assert forward('from "~/components/ui/input"', alias="~") == 'from "~/components/atoms/input"'


class TestReverseRules:

    @pytest.mark.parametrize("before, after", [
        ('import { Button } from "@/components/atoms/button";',
         'import { Button } from "@/components/ui/button";'),
        ("import { Card } from '../../components/organisms/card';",
         "import { Card } from '@/components/ui/card';"),
        ('import { Tabs } from "./molecules/tabs";',
         'import { Tabs } from "@/components/ui/tabs";'),
        ('import { Button, Input } from "@/components/atoms";',
         'import { Button, Input } from "@/components/ui";'),
    ])
    def test_category_paths_return_to_pool(self, before, after):
        assert reverse(before) == after

    def test_scoped_pass_leaves_folder_imports_and_other_ids(self):
        text = (
            'import { Button } from "@/components/atoms/button";\n'
            'import { Input } from "@/components/atoms/input";\n'
            'import { Badge } from "@/components/atoms";\n'
        )
        result = reverse(text, component_ids=["button"])

        assert '"@/components/ui/button"' in result
        assert '"@/components/atoms/input"' in result
        assert '"@/components/atoms"' in result

    def test_forward_then_reverse_restores_alias_imports(self):
        text = 'import { Card } from "@/components/ui/card";\nimport { Dialog } from \'@/components/ui/dialog\';\n'
        assert reverse(forward(text)) == text

    def test_second_pass_changes_nothing(self):
        once = reverse('from "@/components/organisms/card"')
        assert reverse(once) == once
