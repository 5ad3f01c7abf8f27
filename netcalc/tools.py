"""The calculator tools of the main screens, working on text as typed by a user."""

from __future__ import annotations

from netcalc.address import NetAddress, calc_mask, ip_range, number_of_host_addresses
from netcalc.views import format_ipv4, parse_ipv4, parse_mask

INVALID_INPUTS = "Entrées invalides"
INVALID_ENTRY = "Entrée invalide"

NO_HOST_BITS = (
    "Un masque /32 utilise tous les 32 bits pour le réseau. "
    "Il n'y a aucun bit disponible pour l'hôte"
)

POINT_TO_POINT = (
    "2 (liaison point à point entre deux routeurs. "
    "Bien qu'il y ait deux adresses IP, elles ne sont pas considérées"
    "comme des adresses 'hôtes' disponibles au sens traditionnel"
    "pour des ordinateurs ou des périphériques finaux."
    "Le RFC 3021 permet l'utilisation de ces deux adresses pour la liaison,"
    "sans adresse de réseau ni de diffusion distinctes.)"
)

_HELP_LINES = (
    "Aide",
    "Plage d'IP: Déterminer l'adresse IP, la première et la dernière adresse IP "
    "d'un sous-réseau",
    "Masque depuis nb IP: Déterminer le masque de sous-réseau qui peut prendre en "
    "charge un nombre d'adresses IP",
    "Adresse de diffusion: Déterminer l'adresse de diffusion d'un réseau",
    "Hôtes: Déterminer le nombre d'adresses d'hôtes disponibles sur un réseau",
    "Subdivision: Découpe du sous-réseau",
)

_MEMO_LINES = (
    "Bienvenue dans NetCalc-RS !",
    "App pour se faciliter l'administration réseau.",
    "",
    "📘 Théorie : Concepts clés",
    "- IPv4 vs IPv6: IPv4 utilise 32 bits (4.3 milliards d'adresses), "
    "IPv6 utilise 128 bits (3.4×10^38).",
    "  🧩 IPv4 : 192.168.1.1 (adresse privée classique)",
    "  🧩 IPv6 : 2001:0db8:85a3:0000:0000:8a2e:0370:7334",
    "  → Forme raccourcie : 2001:db8:85a3::8a2e:370:7334",
    "- Classes IP: Historiques : Classe A (grands réseaux), B, C (petits). "
    "Aujourd’hui remplacées par CIDR.",
    "- CIDR (/n): Permet de définir précisément la taille d’un réseau. "
    "Ex: /24 = 256 adresses.",
    "  192.168.1.0/24",
    "  → masque décimal équivalent : 255.255.255.0",
    "- Pourquoi subnetter ? Pour optimiser l’allocation des adresses IP, "
    "séparer les zones réseau logiquement.",
    "  🔀 Exemple de sous-réseaux : 192.168.1.0/26, 192.168.1.64/26, "
    "192.168.1.128/26, etc.",
    "  → Issus d’un découpage de 192.168.1.0/24 en /26",
)


class InvalidInput(ValueError):
    """Raised when the values typed into a tool cannot be used."""

    def __init__(self, message: str = INVALID_INPUTS) -> None:
        super().__init__(message)
        self.message = message


def _parse_address(text: str, message: str) -> int:
    try:
        return parse_ipv4(text)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(message) from exc


def _parse_number(text: str, message: str) -> int:
    try:
        return parse_mask(text)
    except ValueError as exc:
        raise InvalidInput(message) from exc


def broadcast(ip: str, mask: str) -> str:
    """Return the broadcast address of the network given by ``ip`` and ``mask``."""
    address = _parse_address(ip, INVALID_INPUTS)
    prefix = _parse_number(mask, INVALID_INPUTS)
    if prefix > 32:
        raise InvalidInput(INVALID_INPUTS)
    return format_ipv4(NetAddress(address, prefix).broadcast_address())


def host_count(mask: str) -> str:
    """Return the number of usable host addresses for a prefix length."""
    prefix = _parse_number(mask, INVALID_ENTRY)
    if prefix == 31:
        return POINT_TO_POINT
    return str(number_of_host_addresses(prefix))


def ip_range_text(ip: str, mask: str) -> str:
    """Return the first and last usable addresses, or the /32 notice."""
    address = _parse_address(ip, INVALID_INPUTS)
    prefix = _parse_number(mask, INVALID_INPUTS)
    if prefix > 32:
        raise InvalidInput(INVALID_INPUTS)
    if prefix == 32:
        return NO_HOST_BITS
    try:
        first, last = ip_range(address, prefix)
    except OverflowError as exc:
        raise InvalidInput(INVALID_INPUTS) from exc
    return f"Première IP: {format_ipv4(first)} | Dernière IP: {format_ipv4(last)}"


def subnet_mask(count: str) -> str:
    """Return the smallest network holding ``count`` addresses as ``/n => mask``."""
    wanted = _parse_number(count, INVALID_ENTRY)
    if wanted < 1:
        raise InvalidInput(INVALID_ENTRY)
    prefix = calc_mask(wanted)
    netmask = (0xFFFFFFFF << (32 - prefix)) & 0xFFFFFFFF
    return f"/{prefix} => {format_ipv4(netmask)}"


def subnet_split(ip: str, mask: str, new_mask: str) -> str:
    """Return the subnets of ``new_mask`` inside the network, one per line."""
    address = _parse_address(ip, INVALID_INPUTS)
    prefix = _parse_number(mask, INVALID_INPUTS)
    new_prefix = _parse_number(new_mask, INVALID_INPUTS)
    if not 1 <= prefix <= 32 or not prefix < new_prefix <= 32:
        raise InvalidInput(INVALID_ENTRY)
    subnets = NetAddress(address, prefix).subnet_split(new_prefix)
    return "\n".join(str(subnet) for subnet in subnets)


def help_text() -> str:
    """Return the help screen describing each tool."""
    return "\n".join(_HELP_LINES)


def memo_text() -> str:
    """Return the welcome screen with its memo of key networking concepts."""
    return "\n".join(_MEMO_LINES)