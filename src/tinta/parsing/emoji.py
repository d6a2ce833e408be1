"""Emoji shortcode table.

Maps ``:name:`` shortcodes (GitHub naming) to a single code point.
Built lazily, at most once, and read-only afterwards.
"""

from __future__ import annotations

from functools import cache
from types import MappingProxyType

_EMOJI: dict[str, int] = {
    # faces
    "smile": 0x1F604,
    "smiley": 0x1F603,
    "grinning": 0x1F600,
    "grin": 0x1F601,
    "laughing": 0x1F606,
    "satisfied": 0x1F606,
    "sweat_smile": 0x1F605,
    "joy": 0x1F602,
    "rofl": 0x1F923,
    "blush": 0x1F60A,
    "innocent": 0x1F607,
    "wink": 0x1F609,
    "relieved": 0x1F60C,
    "heart_eyes": 0x1F60D,
    "kissing_heart": 0x1F618,
    "kissing": 0x1F617,
    "yum": 0x1F60B,
    "stuck_out_tongue": 0x1F61B,
    "stuck_out_tongue_winking_eye": 0x1F61C,
    "stuck_out_tongue_closed_eyes": 0x1F61D,
    "sunglasses": 0x1F60E,
    "smirk": 0x1F60F,
    "neutral_face": 0x1F610,
    "expressionless": 0x1F611,
    "unamused": 0x1F612,
    "sweat": 0x1F613,
    "pensive": 0x1F614,
    "confused": 0x1F615,
    "confounded": 0x1F616,
    "disappointed": 0x1F61E,
    "worried": 0x1F61F,
    "angry": 0x1F620,
    "rage": 0x1F621,
    "cry": 0x1F622,
    "persevere": 0x1F623,
    "triumph": 0x1F624,
    "disappointed_relieved": 0x1F625,
    "frowning": 0x1F626,
    "anguished": 0x1F627,
    "fearful": 0x1F628,
    "weary": 0x1F629,
    "sleepy": 0x1F62A,
    "tired_face": 0x1F62B,
    "grimacing": 0x1F62C,
    "sob": 0x1F62D,
    "open_mouth": 0x1F62E,
    "hushed": 0x1F62F,
    "cold_sweat": 0x1F630,
    "scream": 0x1F631,
    "astonished": 0x1F632,
    "flushed": 0x1F633,
    "sleeping": 0x1F634,
    "dizzy_face": 0x1F635,
    "no_mouth": 0x1F636,
    "mask": 0x1F637,
    "slightly_smiling_face": 0x1F642,
    "slightly_frowning_face": 0x1F641,
    "upside_down_face": 0x1F643,
    "roll_eyes": 0x1F644,
    "thinking": 0x1F914,
    "hugs": 0x1F917,
    "nerd_face": 0x1F913,
    "zipper_mouth_face": 0x1F910,
    "money_mouth_face": 0x1F911,
    "face_with_thermometer": 0x1F912,
    "nauseated_face": 0x1F922,
    "sneezing_face": 0x1F927,
    "clown_face": 0x1F921,
    "cowboy_hat_face": 0x1F920,
    "lying_face": 0x1F925,
    "partying_face": 0x1F973,
    "pleading_face": 0x1F97A,
    "star_struck": 0x1F929,
    "exploding_head": 0x1F92F,
    "shushing_face": 0x1F92B,
    "skull": 0x1F480,
    "ghost": 0x1F47B,
    "alien": 0x1F47D,
    "robot": 0x1F916,
    "poop": 0x1F4A9,
    "hankey": 0x1F4A9,
    "see_no_evil": 0x1F648,
    "hear_no_evil": 0x1F649,
    "speak_no_evil": 0x1F64A,
    # gestures and people
    "+1": 0x1F44D,
    "thumbsup": 0x1F44D,
    "-1": 0x1F44E,
    "thumbsdown": 0x1F44E,
    "ok_hand": 0x1F44C,
    "punch": 0x1F44A,
    "fist": 0x270A,
    "v": 0x270C,
    "wave": 0x1F44B,
    "hand": 0x270B,
    "raised_hand": 0x270B,
    "open_hands": 0x1F450,
    "point_up": 0x261D,
    "point_down": 0x1F447,
    "point_left": 0x1F448,
    "point_right": 0x1F449,
    "raised_hands": 0x1F64C,
    "pray": 0x1F64F,
    "clap": 0x1F44F,
    "muscle": 0x1F4AA,
    "metal": 0x1F918,
    "crossed_fingers": 0x1F91E,
    "handshake": 0x1F91D,
    "writing_hand": 0x270D,
    "eyes": 0x1F440,
    "eye": 0x1F441,
    "brain": 0x1F9E0,
    "baby": 0x1F476,
    "man": 0x1F468,
    "woman": 0x1F469,
    "person_frowning": 0x1F64D,
    "bow": 0x1F647,
    "runner": 0x1F3C3,
    "running": 0x1F3C3,
    "dancer": 0x1F483,
    "ninja": 0x1F977,
    # hearts and symbols
    "heart": 0x2764,
    "yellow_heart": 0x1F49B,
    "green_heart": 0x1F49A,
    "blue_heart": 0x1F499,
    "purple_heart": 0x1F49C,
    "black_heart": 0x1F5A4,
    "broken_heart": 0x1F494,
    "two_hearts": 0x1F495,
    "sparkling_heart": 0x1F496,
    "heartpulse": 0x1F497,
    "cupid": 0x1F498,
    "star": 0x2B50,
    "star2": 0x1F31F,
    "sparkles": 0x2728,
    "dizzy": 0x1F4AB,
    "boom": 0x1F4A5,
    "collision": 0x1F4A5,
    "fire": 0x1F525,
    "zap": 0x26A1,
    "100": 0x1F4AF,
    "anger": 0x1F4A2,
    "zzz": 0x1F4A4,
    "speech_balloon": 0x1F4AC,
    "thought_balloon": 0x1F4AD,
    "exclamation": 0x2757,
    "heavy_exclamation_mark": 0x2757,
    "question": 0x2753,
    "grey_exclamation": 0x2755,
    "grey_question": 0x2754,
    "warning": 0x26A0,
    "no_entry": 0x26D4,
    "no_entry_sign": 0x1F6AB,
    "x": 0x274C,
    "heavy_check_mark": 0x2714,
    "white_check_mark": 0x2705,
    "ballot_box_with_check": 0x2611,
    "heavy_plus_sign": 0x2795,
    "heavy_minus_sign": 0x2796,
    "heavy_multiplication_x": 0x2716,
    "infinity": 0x267E,
    "recycle": 0x267B,
    "copyright": 0x00A9,
    "registered": 0x00AE,
    "tm": 0x2122,
    "information_source": 0x2139,
    "red_circle": 0x1F534,
    "large_blue_circle": 0x1F535,
    "white_circle": 0x26AA,
    "black_circle": 0x26AB,
    "arrow_up": 0x2B06,
    "arrow_down": 0x2B07,
    "arrow_left": 0x2B05,
    "arrow_right": 0x27A1,
    "arrows_counterclockwise": 0x1F504,
    "arrow_forward": 0x25B6,
    "rewind": 0x23EA,
    "fast_forward": 0x23E9,
    "new": 0x1F195,
    "free": 0x1F193,
    "ok": 0x1F197,
    "cool": 0x1F192,
    "sos": 0x1F198,
    "up": 0x1F199,
    "vs": 0x1F19A,
    # nature
    "sunny": 0x2600,
    "cloud": 0x2601,
    "umbrella": 0x2614,
    "snowflake": 0x2744,
    "snowman": 0x26C4,
    "rainbow": 0x1F308,
    "ocean": 0x1F30A,
    "earth_africa": 0x1F30D,
    "earth_americas": 0x1F30E,
    "earth_asia": 0x1F30F,
    "globe_with_meridians": 0x1F310,
    "crescent_moon": 0x1F319,
    "full_moon": 0x1F315,
    "new_moon": 0x1F311,
    "sun_with_face": 0x1F31E,
    "seedling": 0x1F331,
    "evergreen_tree": 0x1F332,
    "deciduous_tree": 0x1F333,
    "palm_tree": 0x1F334,
    "cactus": 0x1F335,
    "tulip": 0x1F337,
    "cherry_blossom": 0x1F338,
    "rose": 0x1F339,
    "hibiscus": 0x1F33A,
    "sunflower": 0x1F33B,
    "four_leaf_clover": 0x1F340,
    "maple_leaf": 0x1F341,
    "fallen_leaf": 0x1F342,
    "mushroom": 0x1F344,
    "dog": 0x1F436,
    "cat": 0x1F431,
    "mouse": 0x1F42D,
    "hamster": 0x1F439,
    "rabbit": 0x1F430,
    "fox_face": 0x1F98A,
    "bear": 0x1F43B,
    "panda_face": 0x1F43C,
    "koala": 0x1F428,
    "tiger": 0x1F42F,
    "lion": 0x1F981,
    "cow": 0x1F42E,
    "pig": 0x1F437,
    "frog": 0x1F438,
    "monkey": 0x1F412,
    "monkey_face": 0x1F435,
    "chicken": 0x1F414,
    "penguin": 0x1F427,
    "bird": 0x1F426,
    "baby_chick": 0x1F424,
    "owl": 0x1F989,
    "wolf": 0x1F43A,
    "horse": 0x1F434,
    "unicorn": 0x1F984,
    "bee": 0x1F41D,
    "honeybee": 0x1F41D,
    "bug": 0x1F41B,
    "butterfly": 0x1F98B,
    "snail": 0x1F40C,
    "beetle": 0x1F41E,
    "ant": 0x1F41C,
    "spider": 0x1F577,
    "turtle": 0x1F422,
    "snake": 0x1F40D,
    "octopus": 0x1F419,
    "crab": 0x1F980,
    "fish": 0x1F41F,
    "tropical_fish": 0x1F420,
    "dolphin": 0x1F42C,
    "whale": 0x1F433,
    "shark": 0x1F988,
    "elephant": 0x1F418,
    "camel": 0x1F42B,
    "feet": 0x1F43E,
    "paw_prints": 0x1F43E,
    "dragon": 0x1F409,
    "t-rex": 0x1F996,
    # food
    "apple": 0x1F34E,
    "green_apple": 0x1F34F,
    "banana": 0x1F34C,
    "cherries": 0x1F352,
    "grapes": 0x1F347,
    "watermelon": 0x1F349,
    "lemon": 0x1F34B,
    "peach": 0x1F351,
    "pear": 0x1F350,
    "strawberry": 0x1F353,
    "pineapple": 0x1F34D,
    "avocado": 0x1F951,
    "tomato": 0x1F345,
    "eggplant": 0x1F346,
    "corn": 0x1F33D,
    "hot_pepper": 0x1F336,
    "bread": 0x1F35E,
    "cheese": 0x1F9C0,
    "egg": 0x1F95A,
    "hamburger": 0x1F354,
    "fries": 0x1F35F,
    "pizza": 0x1F355,
    "hotdog": 0x1F32D,
    "taco": 0x1F32E,
    "burrito": 0x1F32F,
    "ramen": 0x1F35C,
    "spaghetti": 0x1F35D,
    "sushi": 0x1F363,
    "rice": 0x1F35A,
    "icecream": 0x1F366,
    "doughnut": 0x1F369,
    "cookie": 0x1F36A,
    "cake": 0x1F370,
    "birthday": 0x1F382,
    "chocolate_bar": 0x1F36B,
    "candy": 0x1F36C,
    "lollipop": 0x1F36D,
    "popcorn": 0x1F37F,
    "coffee": 0x2615,
    "tea": 0x1F375,
    "beer": 0x1F37A,
    "beers": 0x1F37B,
    "wine_glass": 0x1F377,
    "cocktail": 0x1F378,
    "tropical_drink": 0x1F379,
    "champagne": 0x1F37E,
    "milk_glass": 0x1F95B,
    # activities and objects
    "soccer": 0x26BD,
    "basketball": 0x1F3C0,
    "football": 0x1F3C8,
    "baseball": 0x26BE,
    "tennis": 0x1F3BE,
    "trophy": 0x1F3C6,
    "medal_sports": 0x1F3C5,
    "dart": 0x1F3AF,
    "game_die": 0x1F3B2,
    "video_game": 0x1F3AE,
    "guitar": 0x1F3B8,
    "musical_note": 0x1F3B5,
    "notes": 0x1F3B6,
    "microphone": 0x1F3A4,
    "headphones": 0x1F3A7,
    "art": 0x1F3A8,
    "tada": 0x1F389,
    "confetti_ball": 0x1F38A,
    "balloon": 0x1F388,
    "gift": 0x1F381,
    "christmas_tree": 0x1F384,
    "jack_o_lantern": 0x1F383,
    "ribbon": 0x1F380,
    "crown": 0x1F451,
    "gem": 0x1F48E,
    "ring": 0x1F48D,
    "eyeglasses": 0x1F453,
    "necktie": 0x1F454,
    "shirt": 0x1F455,
    "jeans": 0x1F456,
    "dress": 0x1F457,
    "lipstick": 0x1F484,
    "iphone": 0x1F4F1,
    "phone": 0x260E,
    "telephone": 0x260E,
    "computer": 0x1F4BB,
    "keyboard": 0x2328,
    "desktop_computer": 0x1F5A5,
    "printer": 0x1F5A8,
    "floppy_disk": 0x1F4BE,
    "cd": 0x1F4BF,
    "dvd": 0x1F4C0,
    "camera": 0x1F4F7,
    "movie_camera": 0x1F3A5,
    "tv": 0x1F4FA,
    "radio": 0x1F4FB,
    "battery": 0x1F50B,
    "electric_plug": 0x1F50C,
    "bulb": 0x1F4A1,
    "flashlight": 0x1F526,
    "candle": 0x1F56F,
    "wrench": 0x1F527,
    "hammer": 0x1F528,
    "nut_and_bolt": 0x1F529,
    "gear": 0x2699,
    "hammer_and_wrench": 0x1F6E0,
    "pick": 0x26CF,
    "link": 0x1F517,
    "paperclip": 0x1F4CE,
    "pushpin": 0x1F4CC,
    "scissors": 0x2702,
    "lock": 0x1F512,
    "unlock": 0x1F513,
    "key": 0x1F511,
    "bell": 0x1F514,
    "no_bell": 0x1F515,
    "bookmark": 0x1F516,
    "book": 0x1F4D6,
    "books": 0x1F4DA,
    "notebook": 0x1F4D3,
    "memo": 0x1F4DD,
    "pencil": 0x1F4DD,
    "pencil2": 0x270F,
    "page_facing_up": 0x1F4C4,
    "clipboard": 0x1F4CB,
    "calendar": 0x1F4C6,
    "date": 0x1F4C5,
    "chart_with_upwards_trend": 0x1F4C8,
    "chart_with_downwards_trend": 0x1F4C9,
    "bar_chart": 0x1F4CA,
    "file_folder": 0x1F4C1,
    "open_file_folder": 0x1F4C2,
    "package": 0x1F4E6,
    "email": 0x1F4E7,
    "envelope": 0x2709,
    "inbox_tray": 0x1F4E5,
    "outbox_tray": 0x1F4E4,
    "mailbox": 0x1F4EB,
    "mag": 0x1F50D,
    "mag_right": 0x1F50E,
    "microscope": 0x1F52C,
    "telescope": 0x1F52D,
    "satellite": 0x1F4E1,
    "hourglass": 0x231B,
    "watch": 0x231A,
    "alarm_clock": 0x23F0,
    "stopwatch": 0x23F1,
    "moneybag": 0x1F4B0,
    "dollar": 0x1F4B5,
    "credit_card": 0x1F4B3,
    "shopping_cart": 0x1F6D2,
    "pill": 0x1F48A,
    "syringe": 0x1F489,
    "bomb": 0x1F4A3,
    "gun": 0x1F52B,
    "crystal_ball": 0x1F52E,
    "label": 0x1F3F7,
    "construction": 0x1F6A7,
    "rotating_light": 0x1F6A8,
    "triangular_flag_on_post": 0x1F6A9,
    "checkered_flag": 0x1F3C1,
    "white_flag": 0x1F3F3,
    "black_flag": 0x1F3F4,
    # travel and places
    "rocket": 0x1F680,
    "airplane": 0x2708,
    "helicopter": 0x1F681,
    "car": 0x1F697,
    "red_car": 0x1F697,
    "taxi": 0x1F695,
    "bus": 0x1F68C,
    "truck": 0x1F69A,
    "bike": 0x1F6B2,
    "train": 0x1F686,
    "ship": 0x1F6A2,
    "boat": 0x26F5,
    "sailboat": 0x26F5,
    "anchor": 0x2693,
    "fuelpump": 0x26FD,
    "traffic_light": 0x1F6A5,
    "house": 0x1F3E0,
    "office": 0x1F3E2,
    "hospital": 0x1F3E5,
    "school": 0x1F3EB,
    "castle": 0x1F3F0,
    "tent": 0x26FA,
    "mountain": 0x26F0,
    "volcano": 0x1F30B,
    "statue_of_liberty": 0x1F5FD,
    "world_map": 0x1F5FA,
    "ambulance": 0x1F691,
    "fire_engine": 0x1F692,
    "police_car": 0x1F693,
    "construction_worker": 0x1F477,
    "stop_sign": 0x1F6D1,
}


@cache
def emoji_table() -> MappingProxyType[str, str]:
    """Shortcode name (without colons) -> emoji text."""
    return MappingProxyType({name: chr(codepoint) for name, codepoint in _EMOJI.items()})


def decode_emoji(name: str) -> str | None:
    """Emoji for ``:name:``, or None when the shortcode is unknown."""
    return emoji_table().get(name)
