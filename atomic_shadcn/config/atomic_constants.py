from typing import Dict, Tuple


class AtomicFolders:
    POOL = "ui"
    ATOMS = "atoms"
    MOLECULES = "molecules"
    ORGANISMS = "organisms"
    CATEGORIES = (ATOMS, MOLECULES, ORGANISMS)
    DEFAULT_CATEGORY = MOLECULES

    INDEX_HEADERS = {
        ATOMS: "// Atoms - Basic UI building blocks (buttons, inputs, labels, etc.)",
        MOLECULES: "// Molecules - Combined atomic components (form fields, dialogs, dropdowns, etc.)",
        ORGANISMS: "// Organisms - Complex UI structures (cards, tables, navigation, etc.)",
    }
    ROOT_INDEX_HEADER = "// Main components export"


# Atomic design classification of the shadcn/ui component set
ATOMIC_MAP: Dict[str, str] = {
    # Atoms
    "button": "atoms",
    "input": "atoms",
    "label": "atoms",
    "badge": "atoms",
    "switch": "atoms",
    "checkbox": "atoms",
    "radio-group": "atoms",
    "textarea": "atoms",
    "progress": "atoms",
    "skeleton": "atoms",
    "separator": "atoms",
    "avatar": "atoms",
    "slider": "atoms",
    "toggle": "atoms",

    # Molecules
    "dialog": "molecules",
    "drawer": "molecules",
    "calendar": "molecules",
    "tabs": "molecules",
    "select": "molecules",
    "popover": "molecules",
    "dropdown-menu": "molecules",
    "context-menu": "molecules",
    "menubar": "molecules",
    "tooltip": "molecules",
    "hover-card": "molecules",
    "alert-dialog": "molecules",
    "accordion": "molecules",
    "collapsible": "molecules",
    "toggle-group": "molecules",
    "date-picker": "molecules",
    "form": "molecules",
    "alert": "molecules",
    "toast": "molecules",
    "sonner": "molecules",
    "resizable": "molecules",
    "command": "molecules",

    # Organisms
    "card": "organisms",
    "table": "organisms",
    "data-table": "organisms",
    "sheet": "organisms",
    "navigation-menu": "organisms",
    "pagination": "organisms",
    "breadcrumb": "organisms",
    "sidebar": "organisms",
    "carousel": "organisms",
    "chart": "organisms",
}

# Components whose module exposes a family of named symbols
SPECIAL_EXPORTS: Dict[str, Tuple[str, ...]] = {
    "dialog": (
        "Dialog",
        "DialogClose",
        "DialogContent",
        "DialogDescription",
        "DialogFooter",
        "DialogHeader",
        "DialogOverlay",
        "DialogPortal",
        "DialogTitle",
        "DialogTrigger",
    ),
    "drawer": (
        "Drawer",
        "DrawerPortal",
        "DrawerOverlay",
        "DrawerTrigger",
        "DrawerClose",
        "DrawerContent",
        "DrawerHeader",
        "DrawerFooter",
        "DrawerTitle",
        "DrawerDescription",
    ),
}

# npm packages each component pulls in
COMPONENT_DEPENDENCIES: Dict[str, Tuple[str, ...]] = {
    "dialog": ("@radix-ui/react-dialog",),
    "drawer": ("vaul",),
    "calendar": ("react-day-picker", "date-fns"),
    "select": ("@radix-ui/react-select",),
    "tooltip": ("@radix-ui/react-tooltip",),
    "popover": ("@radix-ui/react-popover",),
    "dropdown-menu": ("@radix-ui/react-dropdown-menu",),
    "context-menu": ("@radix-ui/react-context-menu",),
    "menubar": ("@radix-ui/react-menubar",),
    "toast": ("@radix-ui/react-toast",),
    "tabs": ("@radix-ui/react-tabs",),
    "accordion": ("@radix-ui/react-accordion",),
    "alert-dialog": ("@radix-ui/react-alert-dialog",),
    "hover-card": ("@radix-ui/react-hover-card",),
    "navigation-menu": ("@radix-ui/react-navigation-menu",),
    "progress": ("@radix-ui/react-progress",),
    "radio-group": ("@radix-ui/react-radio-group",),
    "slider": ("@radix-ui/react-slider",),
    "switch": ("@radix-ui/react-switch",),
    "checkbox": ("@radix-ui/react-checkbox",),
    "separator": ("@radix-ui/react-separator",),
    "collapsible": ("@radix-ui/react-collapsible",),
    "toggle": ("@radix-ui/react-toggle",),
    "toggle-group": ("@radix-ui/react-toggle-group",),
    "avatar": ("@radix-ui/react-avatar",),
    "carousel": ("embla-carousel-react",),
    "chart": ("recharts",),
    "sonner": ("sonner",),
    "form": ("react-hook-form", "@hookform/resolvers", "zod"),
    "date-picker": ("react-day-picker", "date-fns"),
}


class ManifestScripts:
    # Scripts written by `init`
    INSTALLED = {
        "install-component": "atomic-shadcn add",
        "organize": "atomic-shadcn organize",
    }
    # Every script name the tool has ever managed; scrubbed by `remove`/`uninstall`
    MANAGED = (
        "install-component",
        "organize",
        "add-component",
        "atomic-init",
        "atomic-add",
        "atomic-organize",
    )
