# monthcards

A two-player card table in a pygame window. The deck holds 48 cards in twelve
month colours, four cards to a month. When a game starts, the deck is
shuffled and dealt in two rounds. In each round the opponent gets four cards,
then the play area gets four, then the dealer gets four. Player 1 always
deals, and player 1's hand is the one you select cards in.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
monthcards
```

A 1366 x 768 window opens on the title screen. Use `--width` and `--height`
to open a window of a different size:

```
monthcards --width 1024 --height 768
```

Both values must be positive.

### Menus

- **Up / Down** move the highlight.
- **Enter** picks the highlighted entry.
- **Escape** goes back one screen, from the options screen and from the screen size screen.

The title menu offers *PLAY*, *OPTIONS* and *QUIT*. Under *OPTIONS* →
*SCREEN SIZE* you can pick a resolution from 640 x 480 up to 1920 x 1200.
The window is resized to that resolution and the menus are scaled to fit it.

### At the table

- **Left / Right** move the selection through player 1's hand.
- **D** deals the top card of the deck to player 1.
- **E** deals the top card of the deck to player 2.
- **F** moves player 1's last card to player 1's discard pile.
- **R** moves player 2's last card to player 2's discard pile.
- **Escape** returns to the title screen.

A hand holds at most eight cards. The play area also holds at most eight.
If a move would go over a zone's limit, the card stays in the zone it came
from.

## What it does not do

The table only deals cards and moves them between zones. It has no game
rules. There are no turns, no matching of months, no scoring and no winner.
It also does not pick who deals: player 1 always deals.

## Using the pieces

You can use the card zones without opening a window:

```python
import random
from monthcards.cards import CardZone, move_card
from monthcards.play import initialise_cards

deck = CardZone(x=0, y=200, card_width=90, card_height=10,
                max_cards=48, cards_wide=1, border_size=2)
initialise_cards(deck)
deck.shuffle(random.Random(1))

hand = CardZone(x=40, y=600, card_width=90, card_height=150,
                max_cards=8, cards_wide=8, border_size=2)
move_card(deck, hand, len(deck) - 1)
print(len(deck), len(hand))  # 47 1
```

`CardZone.add_card` raises `CardZoneError` when the zone is full.
`CardZone.remove_card` raises it when the zone is empty or the index is out of
range. `move_card` does not raise. It returns `True` if the card moved and
`False` if it did not.

`monthcards.play.new_table(dealer=1, rng=None)` sets out a whole table as a
`Table` and deals it. After the deal the deck holds 24 cards. Each hand holds
8, and the play area holds 8.

`monthcards.screens.Session` moves between the screens. Each call to
`Session.update(surface, keys)` advances one frame. `keys` holds the pygame
key codes pressed during that frame.

## Running the tests

```
pip install .[test]
pytest
```