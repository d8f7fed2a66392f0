# fcp_communication/communicator/__init__.py
from fcp_communication.communicator.fcp_communicator import FCPCommunicator

__all__ = ['FCPCommunicator']
