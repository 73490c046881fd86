"""
Presentation Layer - Interfaces externes.

Cette couche expose le mailer aux clients externes
(health checks de l'orchestrateur, monitoring).
"""
