"""Entry point sources written for each project nature."""

from __future__ import annotations

from .models import Nature

SCRIPT_TEMPLATE = """import { about } from './src/sknups.js';

async function main () {
  console.log('Hello, world!');
  console.log(about());
}

await main();
"""

LIBRARY_TEMPLATE = """import { about } from './src/sknups.js';

const SKNUPS = {
  about
};

export { SKNUPS };
"""

_TEMPLATES = {
    Nature.SCRIPT: SCRIPT_TEMPLATE,
    Nature.LIBRARY: LIBRARY_TEMPLATE,
}


def template_for(nature: Nature | str) -> str:
    return _TEMPLATES[Nature(nature)]


__all__ = ["SCRIPT_TEMPLATE", "LIBRARY_TEMPLATE", "template_for"]
