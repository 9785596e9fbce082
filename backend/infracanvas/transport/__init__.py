from infracanvas.transport.client import BackendResponse, DeployClient
from infracanvas.transport.sequencing import AutosaveGate, RequestSequencer

__all__ = ["AutosaveGate", "BackendResponse", "DeployClient", "RequestSequencer"]
