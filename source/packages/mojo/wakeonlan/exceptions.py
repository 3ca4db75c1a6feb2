"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised while building or sending Wake-on-LAN
               magic packets.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all Wake-on-LAN errors.
    """


class MagicPacketBuildError(WakeOnLanError):
    """
        This error is the base error for errors encountered while building a magic packet.
    """


class InvalidMacAddressError(MagicPacketBuildError):
    """
        This error is raised when a MAC address string is not six colon separated octets
        of two hexadecimal digits each.
    """
    def __init__(self, message, mac_text, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.mac_text = mac_text
        return


class MacConversionError(MagicPacketBuildError):
    """
        This error is raised when a MAC address that passed validation could not be
        converted to bytes.
    """


class InvalidBufferLengthError(MagicPacketBuildError):
    """
        This error is raised when the converted MAC address is not exactly six octets long.
    """


class InvalidPacketSizeError(MagicPacketBuildError):
    """
        This error is raised when a magic packet does not have the expected size.
    """
    def __init__(self, message, size, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.size = size
        return


class MalformedMagicPacketError(MagicPacketBuildError):
    """
        This error is raised when a 102 byte payload is not a sync header followed by sixteen
        copies of the same MAC address.
    """


class MagicPacketSendError(WakeOnLanError):
    """
        This error is raised when a magic packet could not be handed to the local network
        stack. The underlying :class:`OSError` is chained as the cause.
    """
    def __init__(self, message, target, stage, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.target = target
        self.stage = stage
        return
