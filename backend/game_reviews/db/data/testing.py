"""Test dataset — small, fixed seed used by the test suite and local development.

Invariants:
    - Insertion order defines serial ids: reviews 1-13, comments 1-6
    - Review 4 has no comments; reviews 2 and 3 have three each
    - created_at given as epoch milliseconds (UTC)
"""

PEXELS = "https://images.pexels.com/photos"
PLACEHOLDER_IMG = (
    "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png"
)
LOREM = (
    "Consequat velit occaecat voluptate do. Dolor pariatur fugiat sint et "
    "proident ex do consequat est. Nisi minim laboris mollit cupidatat et "
    "adipisicing laborum do. Sint sit tempor officia pariatur duis ullamco "
    "labore ipsum nisi voluptate nulla eu veniam. Et do ad id dolore id cillum "
    "non non culpa. Cillum mollit dolor dolore excepteur aliquip. Cillum aliquip "
    "quis aute enim anim ex laborum officia eu eiusmod enim. Ea et ex irure "
    "occaecat do minim irure do veniam reprehenderit."
)

categories = [
    {"slug": "euro game", "description": "Abstact games that involve little luck"},
    {
        "slug": "social deduction",
        "description": "Players attempt to uncover each other's hidden role",
    },
    {"slug": "dexterity", "description": "Games involving physical skill"},
    {"slug": "children's games", "description": "Games suitable for children"},
]

users = [
    {
        "username": "mallionaire",
        "name": "haz",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "philippaclaire9",
        "name": "philippa",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "bainesface",
        "name": "sarah",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "dav3rid",
        "name": "dave",
        "avatar_url": PLACEHOLDER_IMG,
    },
]

reviews = [
    {
        "title": "Agricola",
        "designer": "Uwe Rosenberg",
        "owner": "mallionaire",
        "review_img_url": PLACEHOLDER_IMG,
        "review_body": "Farmyard fun!",
        "category": "euro game",
        "created_at": 1610964020514,
        "votes": 1,
    },
    {
        "title": "Jenga",
        "designer": "Leslie Scott",
        "owner": "philippaclaire9",
        "review_img_url": PLACEHOLDER_IMG,
        "review_body": "Fiddly fun for all the family",
        "category": "dexterity",
        "created_at": 1610964101251,
        "votes": 5,
    },
    {
        "title": "Ultimate Werewolf",
        "designer": "Akihisa Okui",
        "owner": "bainesface",
        "review_img_url": PLACEHOLDER_IMG,
        "review_body": "We couldn't find the werewolf!",
        "category": "social deduction",
        "created_at": 1610964101251,
        "votes": 5,
    },
    {
        "title": "Dolor reprehenderit",
        "designer": "Gamey McGameface",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/278918/pexels-photo-278918.jpeg?w=700&h=700",
        "review_body": LOREM,
        "category": "social deduction",
        "created_at": 1611311824839,
        "votes": 7,
    },
    {
        "title": "Proident tempor et.",
        "designer": "Seymour Buttz",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/5350049/pexels-photo-5350049.jpeg?w=700&h=700",
        "review_body": LOREM,
        "category": "social deduction",
        "created_at": 1610010368077,
        "votes": 5,
    },
    {
        "title": "Occaecat consequat officia in quis commodo.",
        "designer": "Ollie Tabooger",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/207877/pexels-photo-207877.jpeg?w=700&h=700",
        "review_body": LOREM,
        "category": "social deduction",
        "created_at": 1600010368077,
        "votes": 8,
    },
    {
        "title": "Mollit elit qui incididunt veniam occaecat cupidatat",
        "designer": "Avery Wunzboogerz",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/776657/pexels-photo-776657.jpeg?w=700&h=700",
        "review_body": LOREM,
        "category": "social deduction",
        "created_at": 1611311824839,
        "votes": 9,
    },
    {
        "title": "One Night Ultimate Werewolf",
        "designer": "Akihisa Okui",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/5350049/pexels-photo-5350049.jpeg?w=700&h=700",
        "review_body": "We couldn't find the werewolf!",
        "category": "social deduction",
        "created_at": 1610964101251,
        "votes": 5,
    },
    {
        "title": "A truly Quacking Game; Quacks of Quedlinburg",
        "designer": "Wolfgang Warsch",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/279321/pexels-photo-279321.jpeg?w=700&h=700",
        "review_body": (
            "Ever wish you could play a game over and over, but without having "
            "to wait for the results? Well, look no further! In the Quacks of "
            "Quedlinburg, potions are brewed and the player with the most "
            "points wins!"
        ),
        "category": "social deduction",
        "created_at": 1610528311387,
        "votes": 10,
    },
    {
        "title": "Build you own tour de Yorkshire",
        "designer": "Asger Harding Granerud",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/258045/pexels-photo-258045.jpeg?w=700&h=700",
        "review_body": (
            "Cold rain pours on the faces of your team of cyclists, you pedal "
            "harder to finish the stage while the other teams race up the hill "
            "to catch you. Over the winding roads of Yorkshire, your cyclists "
            "must battle to stay ahead of the peloton!"
        ),
        "category": "social deduction",
        "created_at": 1610010368077,
        "votes": 10,
    },
    {
        "title": "That's just what an evil person would say!",
        "designer": "Fiona Lohoar",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/220057/pexels-photo-220057.jpeg?w=700&h=700",
        "review_body": (
            "If you've ever wanted to accuse your friends of being 'evil' then "
            "this is the game for you. Play till a winner is chosen!"
        ),
        "category": "social deduction",
        "created_at": 1610964101251,
        "votes": 8,
    },
    {
        "title": "Scythe; you're gonna need a bigger table!",
        "designer": "Jamey Stegmaier",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/4200740/pexels-photo-4200740.jpeg?w=700&h=700",
        "review_body": (
            "Spend 30 minutes just setting up all of the boards (!) meeple and "
            "decks, just to forget how to play. Scythe can be a lengthy game "
            "but really packs a punch if you put the time in."
        ),
        "category": "social deduction",
        "created_at": 1611311824839,
        "votes": 100,
    },
    {
        "title": "Settlers of Catan: Don't Settle For Less",
        "designer": "Klaus Teuber",
        "owner": "mallionaire",
        "review_img_url": f"{PEXELS}/163064/play-stone-network-networked-interactive-163064.jpeg",
        "review_body": (
            "You have stumbled across an uncharted island rich in natural "
            "resources, but you are not alone; other adventurers have come "
            "ashore too, and the race to settle the island has begun. Will you "
            "be the first to claim and settle this new land?"
        ),
        "category": "social deduction",
        "created_at": 788918400,
        "votes": 16,
    },
]

comments = [
    {
        "body": "I loved this game too!",
        "votes": 16,
        "author": "bainesface",
        "review_id": 2,
        "created_at": 1511354613389,
    },
    {
        "body": "My dog loved this game too!",
        "votes": 13,
        "author": "mallionaire",
        "review_id": 3,
        "created_at": 1610964545410,
    },
    {
        "body": "I didn't know dogs could play games",
        "votes": 10,
        "author": "philippaclaire9",
        "review_id": 3,
        "created_at": 1610964588110,
    },
    {
        "body": "EPIC board game!",
        "votes": 16,
        "author": "bainesface",
        "review_id": 2,
        "created_at": 1511354163389,
    },
    {
        "body": "Now this is a story all about how, board games turned my life upside down",
        "votes": 13,
        "author": "mallionaire",
        "review_id": 2,
        "created_at": 1610965445410,
    },
    {
        "body": "Not sure about dogs, but my cat likes to get involved with board games",
        "votes": 10,
        "author": "philippaclaire9",
        "review_id": 3,
        "created_at": 1616874588110,
    },
]
