"""Core model, detection and conversion modules.

WHY: The core package holds the stable heart of the converter: the
dialect-neutral model, the format detector, source discovery and the
conversion engine that ties parsers, mapping tables and emitters together.

HOW: model.py defines the data structures, detector.py identifies the
source dialect, discovery.py finds the source file, converter.py runs
the pipeline, errors.py and settings.py hold the shared contracts.

RULES:
- Model dataclasses are the contract between parsers and emitters
- The detector and parsers never raise on line content
- All fatal conditions are ConversionError subclasses
"""
