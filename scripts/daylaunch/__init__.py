"""
Daylaunch - pick a group of applications from a terminal menu and start them.

Architecture:
- providers.py: Launch spec model, error types and provider protocols
- config_provider.py: JSON config loading and validation
- controller.py: Selection state machine (no terminal access)
- process_launcher.py: Detached process creation
- views/: Textual screen components
- app.py: Textual application wiring keys to the controller

Extensibility points:
1. New config sources: Implement the ConfigProvider protocol
2. New front ends: Drive SelectionController with InputEvent values
"""
