"""HR workflow designer package.

Subpackages:
- engine: Graph model, structural validation, execution planning and simulation
- nodes: Node type registry and typed per-type payloads
- automations: Catalog of simulated automated actions
- editor: Editor session (id minting, node edits, export/import)
"""
