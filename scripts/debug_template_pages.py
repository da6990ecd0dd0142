# scripts/debug_template_pages.py
from __future__ import annotations

import sys

from quotegen.config import load_settings
from quotegen.storage.template_loader import load_template
from quotegen.styling.quote.anchors import PAGE_ROLES
from quotegen.styling.quote.renderer import template_index_for
from quotegen.styling.quote.table import rows_per_page


def main() -> None:
    source = sys.argv[1] if len(sys.argv) > 1 else load_settings().template
    tpl = load_template(source)

    print("Template :", source)
    print("Pages    :", tpl.page_count)
    for i in range(tpl.page_count):
        w, h = tpl.page_size(i)
        print(f"  page {i}: {w:.1f} x {h:.1f} pt")

    print("\nRole -> template page:")
    for role in PAGE_ROLES:
        print(f"  {role:10} : {template_index_for(tpl, role)}")

    _, h = tpl.page_size(0)
    print("\nTable rows per page (single-line estimate):", rows_per_page(h))


if __name__ == "__main__":
    main()
