"""Command-line front end offering each calculator screen as a sub-command."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from netcalc.calculations import calculate_network, find_broadcast, find_usable_range
from netcalc.mask_help import find_mask
from netcalc.subnetting import subnetting_table
from netcalc.tools import (
    InvalidInput,
    broadcast,
    help_text,
    host_count,
    ip_range_text,
    memo_text,
    subnet_mask,
    subnet_split,
)
from netcalc.views import Modal, View

_VIEW_LABELS = {
    View.HOME: "Home",
    View.IP_RANGE: "Plage d'IP",
    View.SUBNET_MASK: "Masque depuis nb IP",
    View.BROADCAST: "Adresse de diffusion",
    View.HOST_COUNT: "Hôtes",
    View.SUBNET_SPLIT: "Subdivision",
    View.HELP: "Aide",
}

_GUIDE_LABELS = {
    Modal.NET_ADDRESS: "Comment déterminer l'adresse réseau",
    Modal.FIND_IPS_ADDR: "Comment déterminer les adresses utilisables",
    Modal.BROADCAST_ADDR: "Comment calculer l'adresse de Diffusion",
    Modal.SUBNETTING: "Comment Découper un réseau",
    Modal.FIND_MASK: "Comment calculer le Masque",
}

_GUIDE_COMMAND = "guide"

Handler = Callable[[argparse.Namespace], str]


def _menu(labels: dict, indent: str = "  ") -> list[str]:
    width = max(len(str(key)) for key in labels)
    return [f"{indent}{str(key):<{width}}  {label}" for key, label in labels.items()]


def _show_home(_: argparse.Namespace) -> str:
    lines = [memo_text(), "", "Outils :"]
    lines.extend(_menu(_VIEW_LABELS))
    return "\n".join(lines)


def _show_help(_: argparse.Namespace) -> str:
    lines = [help_text(), "", f"Guides ({_GUIDE_COMMAND} <nom>) :"]
    lines.extend(_menu(_GUIDE_LABELS))
    return "\n".join(lines)


def _show_ip_range(args: argparse.Namespace) -> str:
    return ip_range_text(args.ip, args.mask)


def _show_subnet_mask(args: argparse.Namespace) -> str:
    return subnet_mask(args.count)


def _show_broadcast(args: argparse.Namespace) -> str:
    return broadcast(args.ip, args.mask)


def _show_host_count(args: argparse.Namespace) -> str:
    return host_count(args.mask)


def _show_subnet_split(args: argparse.Namespace) -> str:
    return subnet_split(args.ip, args.mask, args.new_mask)


def _guide_net_address(args: argparse.Namespace) -> str:
    calculation = calculate_network(args.ip, args.mask)
    lines = [calculation.message, "", "Représentation binaire :"]
    lines.extend(calculation.lines())
    lines.append("")
    for part in range(4, 0, -1):
        ip_bits, mask_bits, network_bits = calculation.octet(part)
        lines.append(f"Octet {5 - part} : {ip_bits} & {mask_bits} = {network_bits}")
    return "\n".join(lines)


def _guide_find_ips_addr(args: argparse.Namespace) -> str:
    usable = find_usable_range(args.ip, args.mask)
    lines = [usable.message, "", "Représentation binaire :"]
    lines.extend(usable.lines())
    return "\n".join(lines)


def _guide_broadcast_addr(args: argparse.Namespace) -> str:
    calculation = find_broadcast(args.ip, args.mask)
    lines = [calculation.message, "", "Représentation binaire :"]
    lines.extend(calculation.lines())
    return "\n".join(lines)


def _guide_subnetting(args: argparse.Namespace) -> str:
    table = subnetting_table(args.ip, args.mask, args.new_mask)
    if not table.body:
        return "Aucun sous-réseau à afficher"
    return str(table).rstrip("\n")


def _guide_find_mask(args: argparse.Namespace) -> str:
    explanation = find_mask(args.count)
    return "\n".join(
        [explanation.explain(), "", "Représentation binaire du masque :",
         explanation.bit_line()]
    )


def _add_ip_mask(parser: argparse.ArgumentParser, with_new_mask: bool = False) -> None:
    parser.add_argument("ip", help="adresse IP, par exemple 192.168.1.10")
    parser.add_argument("mask", help="longueur du masque, par exemple 24")
    if with_new_mask:
        parser.add_argument("new_mask", help="nouveau masque, par exemple 26")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per screen and guide."""
    parser = argparse.ArgumentParser(
        prog="netcalc",
        description="Calculatrice réseau IPv4.",
    )
    parser.set_defaults(handler=_show_home)
    commands = parser.add_subparsers(dest="view", metavar="commande")

    home = commands.add_parser(str(View.HOME), help=_VIEW_LABELS[View.HOME])
    home.set_defaults(handler=_show_home)

    ip_range = commands.add_parser(str(View.IP_RANGE), help=_VIEW_LABELS[View.IP_RANGE])
    _add_ip_mask(ip_range)
    ip_range.set_defaults(handler=_show_ip_range)

    mask = commands.add_parser(str(View.SUBNET_MASK), help=_VIEW_LABELS[View.SUBNET_MASK])
    mask.add_argument("count", help="nombre d'adresses IP")
    mask.set_defaults(handler=_show_subnet_mask)

    bcast = commands.add_parser(str(View.BROADCAST), help=_VIEW_LABELS[View.BROADCAST])
    _add_ip_mask(bcast)
    bcast.set_defaults(handler=_show_broadcast)

    hosts = commands.add_parser(str(View.HOST_COUNT), help=_VIEW_LABELS[View.HOST_COUNT])
    hosts.add_argument("mask", help="longueur du masque")
    hosts.set_defaults(handler=_show_host_count)

    split = commands.add_parser(str(View.SUBNET_SPLIT), help=_VIEW_LABELS[View.SUBNET_SPLIT])
    _add_ip_mask(split, with_new_mask=True)
    split.set_defaults(handler=_show_subnet_split)

    help_view = commands.add_parser(str(View.HELP), help=_VIEW_LABELS[View.HELP])
    help_view.set_defaults(handler=_show_help)

    guide = commands.add_parser(_GUIDE_COMMAND, help="guides pas à pas")
    guides = guide.add_subparsers(dest="guide", metavar="guide", required=True)
    guide_handlers: dict[Modal, tuple[Handler, str]] = {
        Modal.NET_ADDRESS: (_guide_net_address, "ip_mask"),
        Modal.FIND_IPS_ADDR: (_guide_find_ips_addr, "ip_mask"),
        Modal.BROADCAST_ADDR: (_guide_broadcast_addr, "ip_mask"),
        Modal.SUBNETTING: (_guide_subnetting, "split"),
        Modal.FIND_MASK: (_guide_find_mask, "count"),
    }
    for modal, (handler, arguments) in guide_handlers.items():
        sub = guides.add_parser(str(modal), help=_GUIDE_LABELS[modal])
        if arguments == "count":
            sub.add_argument("count", help="nombre d'adresses IP")
        else:
            _add_ip_mask(sub, with_new_mask=arguments == "split")
        sub.set_defaults(handler=handler)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return 0 on success and 1 on invalid input."""
    args = build_parser().parse_args(argv)
    try:
        text = args.handler(args)
    except InvalidInput as exc:
        print(exc.message, file=sys.stderr)
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())