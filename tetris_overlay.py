import pygame
from tetris_config import CONFIG

class Overlay:
    """F1 tuning panel. Edits CONFIG in place so changes apply immediately."""
    def __init__(self):
        self.active=False
        self.items=[
            ("CELL_SIZE","Cell size",16,48,2),
            ("DAS_MS","DAS (ms)",0,400,10),
            ("ARR_MS","ARR (ms, 0=instant)",0,200,5),
            ("LOCK_DELAY_MS","Lock delay (ms)",100,2000,25),
            ("GRAVITY_MULT","Gravity ×",0.2,5.0,0.1),
            ("SOFT_DROP_FACTOR","Soft drop ×",2,40,1),
            ("SHOW_GHOST","Show ghost",False,True,None),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key==pygame.K_F1: self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        key,label,lo,hi,step=self.items[self.index]
        val=CONFIG[key]
        if isinstance(lo,bool):
            if e.key in (pygame.K_RETURN,pygame.K_KP_ENTER,pygame.K_LEFT,pygame.K_RIGHT): CONFIG[key]=not val
        else:
            if e.key==pygame.K_LEFT: CONFIG[key]=type(val)(round(max(lo,val-step),3))
            if e.key==pygame.K_RIGHT: CONFIG[key]=type(val)(round(min(hi,val+step),3))

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("CONFIG (F1 to close)",True,(230,240,255)),(60,56))
        screen.blit(font.render("↑/↓ select • ←/→ adjust • Enter toggle",True,(200,210,235)),(60,80))
        y=120
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            v=CONFIG[key]
            txt=f"{label}: {v:.2f}" if isinstance(v,float) else f"{label}: {v}"
            screen.blit(font.render(txt,True,col),(60,y)); y+=28
