"""Templates for the new-listing notification sent to companies."""

NEW_LISTING_SUBJECT = "New Agricultural Waste Posted"

NEW_LISTING_HTML_BODY = """
<p>Hello {{ company_name }},</p>
<p>A new waste has been posted:</p>
<ul>
  <li><strong>Title:</strong> {{ title }}</li>
  <li><strong>Quantity:</strong> {{ quantity }} kg</li>
  <li><strong>Location:</strong> {{ location }}</li>
  <li><strong>Contact:</strong> {{ contact }}</li>
</ul>
<p>Visit your dashboard to respond.</p>
""".strip()

NEW_LISTING_TEXT_BODY = """
Hello {{ company_name }},

A new waste has been posted:

Title: {{ title }}
Quantity: {{ quantity }} kg
Location: {{ location }}
Contact: {{ contact }}

Visit your dashboard to respond.
""".strip()
