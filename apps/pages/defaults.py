"""Seed data for the storefront copy and the floating contact buttons."""

HERO_TITLE = 'Safe and convenient gift card exchange'
HERO_SUBTITLE = 'Live rates · Fast exchange · Secure and reliable'

PROCESS_STEPS = [
    {'title': 'Choose a product', 'description': 'Browse the exchange hall and pick the gift card you want to trade', 'icon': '📋'},
    {'title': 'Confirm the rate', 'description': 'Check the live rate and confirm the amount you will receive', 'icon': '💱'},
    {'title': 'Submit the order', 'description': 'Fill in the exchange details and submit your order', 'icon': '📝'},
    {'title': 'Get paid fast', 'description': 'Funds arrive quickly once the order has been processed', 'icon': '✅'},
]

SECURITY_FEATURES = [
    {'title': 'Funds protection', 'description': 'Multiple layers of encryption keep your funds safe', 'icon': '🔒'},
    {'title': 'Live monitoring', 'description': 'Round-the-clock monitoring with immediate handling of anomalies', 'icon': '👁️'},
    {'title': 'Fast response', 'description': 'A dedicated support team answers quickly', 'icon': '⚡'},
    {'title': 'Transparent trading', 'description': 'Every trade is recorded and can be looked up at any time', 'icon': '📊'},
]

FAQS = [
    {'question': 'How do I exchange a gift card?',
     'answer': 'Pick a product in the exchange hall, confirm the rate and amount, then submit your order.'},
    {'question': 'Are the rates live?',
     'answer': 'Yes. Rates are refreshed from market data every few minutes.'},
    {'question': 'How long does an exchange take?',
     'answer': 'Orders are usually processed and paid out within 1-3 business days.'},
    {'question': 'Which payment methods are supported?',
     'answer': 'We support several payout methods including bank transfer and mobile wallets.'},
    {'question': 'How can I check my order status?',
     'answer': 'All trades and their status are listed on the trade records page.'},
    {'question': 'What if an exchange fails?',
     'answer': 'Failed exchanges are refunded to the original account. Contact support if anything looks wrong.'},
]

SOCIAL_BUTTONS = [
    {'type': 'whatsapp', 'label': 'WhatsApp', 'url': 'https://wa.me/8619972918971',
     'icon_color': '#FFFFFF', 'bg_color': '#25D366', 'sort_order': 1, 'is_active': True},
    {'type': 'facebook', 'label': 'Facebook', 'url': 'https://www.facebook.com/profile.php?id=61584869132019',
     'icon_color': '#FFFFFF', 'bg_color': '#1877F2', 'sort_order': 2, 'is_active': True},
    {'type': 'telegram', 'label': 'Telegram', 'url': 'https://t.me/+8619972918971',
     'icon_color': '#FFFFFF', 'bg_color': '#0088cc', 'sort_order': 3, 'is_active': False},
    {'type': 'tiktok', 'label': 'TikTok', 'url': 'https://www.tiktok.com/@veryrich429',
     'icon_color': '#FFFFFF', 'bg_color': '#000000', 'sort_order': 4, 'is_active': True},
    {'type': 'instagram', 'label': 'Instagram', 'url': 'https://www.instagram.com/yourusername',
     'icon_color': '#FFFFFF', 'bg_color': 'linear-gradient(45deg, #833AB4 0%, #FD1D1D 50%, #FCB045 100%)',
     'sort_order': 5, 'is_active': True},
]
