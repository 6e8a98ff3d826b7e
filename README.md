# adventkit

A library of solvers for a set of well-known programming puzzles. Every
solver takes the raw puzzle input as a string and returns the answer, so it
fits in a notebook, a script or a test suite equally well. There are no
runtime dependencies beyond the standard library.

## Usage

```python
from pathlib import Path

from adventkit import cubes, scratchcards, stones

text = Path("input.txt").read_text()

cubes.sum_possible_games(text)     # ids of games playable with 12 red, 13 green, 14 blue
cubes.sum_of_powers(text)          # sum of red * green * blue minimums

scratchcards.card_points(text)     # doubling score per card
scratchcards.total_cards(text)     # cards held once copies are counted

stones.stones_after("125 17", 25)  # number of stones after 25 blinks
```

The lower-level pieces are public too, for when you want more than the final
number:

```python
from adventkit.camel_cards import hand_type, HandType
from adventkit.oasis import extrapolate_next, extrapolate_previous

hand_type("KTJJT", jokers=True)                 # HandType.FOUR_OF_KIND
extrapolate_next([0, 3, 6, 9, 12, 15])          # 18
extrapolate_previous([10, 13, 16, 21, 30, 45])  # 5
```

Each module also has parsing functions (`parse_games`, `parse_cards`,
`parse_almanac`, `parse_network`, `parse_bricks`, `parse_map`, ...) and the
data classes they return, such as `Game`, `Card`, `Almanac`, `Network`,
`BrickStack`, `TopoMap`, `Machine` and `Region`. Malformed input raises
`ValueError`.

## Modules

| Module | Puzzle | Entry points |
| --- | --- | --- |
| `cubes` | cube games | `sum_possible_games`, `sum_of_powers` |
| `gears` | engine schematic | `part_number_sum`, `gear_ratio_sum` |
| `scratchcards` | scratchcards | `card_points`, `total_cards` |
| `oasis` | sequence extrapolation | `sum_next`, `sum_previous` |
| `seeds` | seed almanac | `lowest_location`, `lowest_location_of_ranges` |
| `boat_race` | boat races | `margin_product`, `single_race_ways` |
| `camel_cards` | camel cards | `total_winnings` |
| `navigation` | desert network | `steps_to_zzz`, `ghost_steps` |
| `hail` | hailstone paths in the x/y plane | `count_crossings` |
| `bricks` | falling bricks | `safe_to_disintegrate`, `chain_reaction_total` |
| `garden_walk` | garden steps | `reachable_plots` |
| `hike` | longest hike | `longest_hike` |
| `overload` | wiring cut | `cut_product` |
| `trails` | hiking trails | `trailhead_scores`, `trailhead_ratings` |
| `arcade` | claw machines | `fewest_tokens` |
| `fences` | garden fences | `fence_price`, `bulk_fence_price` |
| `stones` | plutonian stones | `stones_after` |

## Options

Functions that cover both halves of a puzzle take a switch for the second
half:

- `camel_cards.total_winnings(text, jokers=False)`: with `jokers`, each J
  joins the largest group of cards and ranks below every other card.
- `boat_race.margin_product(text, quadratic=False)` and
  `boat_race.single_race_ways(text, quadratic=False)`: with `quadratic`, the
  count comes from the roots of the distance quadratic in floating point
  instead of exact integer arithmetic.
- `hike.longest_hike(text, slippery=True)`: slopes can only be entered in the
  direction they point; with `slippery=False` they are ordinary paths.
- `arcade.fewest_tokens(text, offset=0)`: `offset` is added to every prize
  coordinate; `arcade.PART_TWO_OFFSET` holds the shifted value.

Other defaults: `garden_walk.reachable_plots(text, steps=64)`,
`stones.stones_after(text, blinks=25)`, and
`hail.count_crossings(text, low, high)` with a test area of
200000000000000 to 400000000000000.

## What it does not do

There is no command-line program: the package reads no files and prints
nothing. Read your input yourself and pass the text to the functions above.