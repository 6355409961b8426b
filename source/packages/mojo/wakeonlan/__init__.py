"""
.. module:: wakeonlan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The wakeonlan package contains modules for building Wake-on-LAN magic packets and
               broadcasting them to wake sleeping devices.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
