# netcalc

A small IPv4 network calculator for everyday network administration and for
learning how subnetting works. It answers the usual questions:

- the first and last usable address of a network,
- the smallest mask that covers a given number of addresses,
- the broadcast address of a network,
- the number of host addresses a mask leaves,
- how a network splits into smaller subnets.

Alongside the answers it can show the working: the binary AND of address and
mask octet by octet, the bits set to obtain the broadcast address, and a
step-by-step explanation of how a mask is derived from an address count.

Messages and explanations are in French.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `netcalc` command. Run without a
sub-command (or with `home`) it prints a welcome memo on key IPv4 concepts and
the list of tools. List all options with:

```
netcalc --help
```

Sub-commands:

| Command | Arguments | Output |
|---|---|---|
| `home` | | welcome memo and list of tools |
| `ip-range` | `ip mask` | first and last usable address |
| `subnet-mask` | `count` | smallest prefix and dotted netmask for `count` addresses |
| `broadcast` | `ip mask` | broadcast address |
| `host-count` | `mask` | number of host addresses |
| `subnet-split` | `ip mask new_mask` | the subnets of `new_mask`, one per line |
| `help` | | description of each tool and list of guides |
| `guide net-address` | `ip mask` | network address with the binary AND, octet by octet |
| `guide find-ips-addr` | `ip mask` | usable range with binary lines |
| `guide broadcast-addr` | `ip mask` | broadcast address with binary lines |
| `guide subnetting` | `ip mask new_mask` | subnets as a text table with their binary form |
| `guide find-mask` | `count` | step-by-step derivation of the mask |

Examples:

```
$ netcalc ip-range 192.168.1.0 24
Première IP: 192.168.1.1 | Dernière IP: 192.168.1.254
$ netcalc subnet-mask 50
/26 => 255.255.255.192
$ netcalc broadcast 192.168.1.10 24
192.168.1.255
$ netcalc host-count 24
254
$ netcalc subnet-split 192.168.1.0 24 26
192.168.1.0/26
192.168.1.64/26
192.168.1.128/26
192.168.1.192/26
```

`ip-range` and `guide find-ips-addr` use the address exactly as given; pass
the network address to get the usable range of that network. A `/32` mask is
answered with a notice that no host bits are left; `host-count 31` explains
the point-to-point case. For `subnet-split` and `guide subnetting` the current
mask must be between 1 and 32 and the new mask longer than it.

On invalid input the command prints the error message (for example
`Entrées invalides`) to standard error and exits with status 1; otherwise it
exits with status 0.

## Library

The calculations are plain functions and can be used directly.

```python
from netcalc.address import NetAddress, calc_mask, ip_range, number_of_host_addresses
from netcalc.views import format_ipv4, parse_ipv4

net = NetAddress(parse_ipv4("192.168.1.10"), 24)
print(format_ipv4(net.broadcast_address()))   # 192.168.1.255
print(net.describe())                          # 192.168.1.10/24
                                               # <=>11000000.10101000.00000001.00001010

first, last = ip_range(parse_ipv4("192.168.1.0"), 24)
print(format_ipv4(first), format_ipv4(last))   # 192.168.1.1 192.168.1.254

print(calc_mask(50))                  # 26
print(number_of_host_addresses(24))   # 254

for subnet in net.subnet_split(26):
    print(subnet.ip_to_string())      # 192.168.1.0/26, 192.168.1.64/26, ...
```

Modules:

- `netcalc.address`: `NetAddress` (a frozen address/prefix pair with
  `subnet_split`, `broadcast_address`, `to_binary_string`, `ip_to_string`,
  `describe`), and `ip_range`, `calc_mask`, `number_of_host_addresses`.
  Out-of-range values raise `ValueError`.
- `netcalc.views`: `format_ipv4`, `parse_ipv4`, `parse_mask`, and the `View`,
  `Theme` and `Modal` enums naming the screens, themes and guides.
- `netcalc.tools`: helpers that take user-typed text and return the message
  shown for each tool (`broadcast`, `host_count`, `ip_range_text`,
  `subnet_mask`, `subnet_split`, `help_text`, `memo_text`). Bad entries raise
  `InvalidInput`, a `ValueError` whose `message` holds the text to show.
- `netcalc.calculations`: `calculate_network`, `find_broadcast` and
  `find_usable_range`, returning `NetworkCalculation`, `BroadcastCalculation`
  and `UsableRange` with a `message`, the 32-bit strings and labelled
  `lines()`.
- `netcalc.mask_help`: `find_mask`, returning a `MaskExplanation` whose
  `explain()` gives the worked steps.
- `netcalc.subnetting`: `subnetting_table`, returning a `netcalc.table.Table`
  that prints with `str()` as an aligned text table.
- `netcalc.bits`: `bit_octets`, `octet_bits`, `render_bit_line` for showing
  values grouped by octet.
- `netcalc.cli`: `build_parser` and `main`, the `netcalc` command.

## What it does not do

netcalc works on the command line and as a library only; it has no graphical
window. The `Theme` enum is defined, but nothing in the package applies a
colour theme. Only IPv4 is handled.