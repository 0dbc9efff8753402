"""Infrastructure layer — third-party graph tooling (NetworkX).

This layer depends on stdlib and third-party libs.
It must never import from domain, services, commands, or output.
The service layer bridges between the engine and infrastructure.
"""
