"""
Jinja2 templates of the generated Go files.
"""

# the template to generate the color scheme
COLOR_SOURCE_TEMPLATE = """\
package {{ package }}

// This file is generated by adwaita-themegen
// Please do not edit manually, use:
// {{ command }}
//
// The colors are taken from: {{ source_url }}

import (
	"image/color"

	"fyne.io/fyne/v2"
	"fyne.io/fyne/v2/theme"
)

var adwaitaDarkScheme = map[fyne.ThemeColorName]color.Color{
{%- for name, sample in dark_scheme %}
	{{ name }}: {{ sample.color | nrgba }}, // Adwaita color name @{{ sample.source_name }}
{%- endfor %}
}

var adwaitaLightScheme = map[fyne.ThemeColorName]color.Color{
{%- for name, sample in light_scheme %}
	{{ name }}: {{ sample.color | nrgba }}, // Adwaita color name @{{ sample.source_name }}
{%- endfor %}
}
"""

# the template where to bundle the icons in a map
ICON_SOURCE_TEMPLATE = """\
package {{ package }}

// This file is generated by adwaita-themegen
// Please do not edit manually, use:
// {{ command }}
//
// This icons come from "GNOME Project"
// Repository: https://gitlab.gnome.org/GNOME/adwaita-icon-theme
// Licence: CC-BY-SA 3.0
// See: https://gitlab.gnome.org/GNOME/adwaita-icon-theme/-/blob/master/COPYING_CCBYSA3

import (
	"fyne.io/fyne/v2"
	"fyne.io/fyne/v2/theme"
)

var adwaitaIcons = map[fyne.ThemeIconName]fyne.Resource{
{%- for name, icon in icons %}
{%- if icon.is_symbolic %}
	theme.{{ name }}: theme.NewThemedResource(&fyne.StaticResource{
		StaticName:    {{ icon.static_name | go_quote }},
		StaticContent: []byte({{ icon.content | go_quote }}),
	}),
{%- else %}
	theme.{{ name }}: &fyne.StaticResource{
		StaticName:    {{ icon.static_name | go_quote }},
		StaticContent: []byte({{ icon.content | go_quote }}),
	},
{%- endif %}
{%- endfor %}
}
"""
